"""
Viewport allocator.

Splits the rendering surface into a rows x cols grid with one cell per
topology, keeping the grid close to square.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from netdash.configs.constants import MAX_GRID_ASPECT_DIFF, MAX_GRID_DIM
from netdash.errors import LayoutOverflowWarning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridShape:
    """Result of a grid allocation."""

    rows: int
    cols: int
    overflow: bool = False

    @property
    def cells(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class Viewport:
    """Cell of the grid assigned to one topology, in surface coordinates."""

    name: str
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        """Center in the viewport's own coordinate space."""
        return (self.width / 2, self.height / 2)


def allocate_grid(count: int, max_dim: int = MAX_GRID_DIM) -> GridShape:
    """
    Choose the grid shape for ``count`` topologies.

    Scans cols then rows over ``1..max_dim`` and keeps the first shape with
    the least unused cells among those with ``rows * cols >= count`` and
    ``|rows - cols| <= 2``.

    :param count: Number of topologies, positive
    :param max_dim: Search bound for rows and cols
    :return: The chosen shape; flagged as overflow when no shape within the
        bound fits, in which case the largest grid is returned
    :raises ValueError: If count or max_dim is not positive
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    if max_dim < 1:
        raise ValueError(f"max_dim must be positive, got {max_dim}")

    best: GridShape | None = None
    best_waste = 0
    for cols in range(1, max_dim + 1):
        for rows in range(1, max_dim + 1):
            cells = rows * cols
            if cells < count or abs(rows - cols) > MAX_GRID_ASPECT_DIFF:
                continue
            waste = cells - count
            if best is None or waste < best_waste:
                best = GridShape(rows=rows, cols=cols)
                best_waste = waste

    if best is None:
        message = (
            f"{count} topologies exceed the {max_dim}x{max_dim} viewport grid; "
            f"only the first {max_dim * max_dim} get a viewport"
        )
        logger.warning(message)
        warnings.warn(message, LayoutOverflowWarning, stacklevel=2)
        return GridShape(rows=max_dim, cols=max_dim, overflow=True)

    return best


def viewport_rects(
    names: Sequence[str], shape: GridShape, width: float, height: float
) -> dict[str, Viewport]:
    """
    Assign grid cells to topology names in row-major order.

    Names beyond the grid capacity are left out of the result.
    """
    cell_width = width / shape.cols
    cell_height = height / shape.rows

    viewports: dict[str, Viewport] = {}
    for index, name in enumerate(names[: shape.cells]):
        row, col = divmod(index, shape.cols)
        viewports[name] = Viewport(
            name=name,
            row=row,
            col=col,
            x=col * cell_width,
            y=row * cell_height,
            width=cell_width,
            height=cell_height,
        )
    return viewports
