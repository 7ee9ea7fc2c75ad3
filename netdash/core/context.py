"""
Dashboard context.

One context object is created by the application root and handed to the
poller and the drag controller. It holds every piece of mutable dashboard
state; nothing lives at module level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from netdash.configs.settings import DashboardSettings
from netdash.core.store import TopologyBinding, TopologyStore
from netdash.domain.topology import Node
from netdash.layout.grid import GridShape, allocate_grid, viewport_rects

logger = logging.getLogger(__name__)


@dataclass
class DragBinding:
    """Node held by an active drag gesture and the topology owning it."""

    node: Node
    binding: TopologyBinding


@dataclass
class DashboardContext:
    """
    Mutable dashboard state.

    Attributes:
        settings: Dashboard configuration
        store: Topology bindings
        surface_size: Measured (width, height) of the rendering surface
        requested_selection: Topology the user asked for (single-topology mode)
        current_selection: Topology currently shown (single-topology mode)
        grid: Grid shape of the last allocation
        last_payload: Last payload committed to the store
        last_surface_size: Surface size seen by the last completed poll cycle
        drag: Active drag gesture, None when idle
    """

    settings: DashboardSettings
    store: TopologyStore
    surface_size: tuple[float, float] = (0.0, 0.0)
    requested_selection: str | None = None
    current_selection: str | None = None
    grid: GridShape | None = None
    last_payload: str | None = None
    last_surface_size: tuple[float, float] = (0.0, 0.0)
    drag: DragBinding | None = field(default=None, repr=False)

    @property
    def surface_ready(self) -> bool:
        """True once the rendering surface reports a non-zero size."""
        width, height = self.surface_size
        return width > 0 or height > 0

    def visible_bindings(self) -> list[TopologyBinding]:
        """
        Bindings currently shown.

        All topologies in grid mode; only the selected one in
        single-topology mode.
        """
        if not self.settings.single_topology:
            return list(self.store)
        if self.current_selection is None:
            return []
        binding = self.store.get(self.current_selection)
        return [binding] if binding is not None else []

    def relayout(self) -> GridShape | None:
        """
        Allocate the viewport grid and re-center every visible physics binding.

        Bindings left without a cell (grid overflow or hidden in
        single-topology mode) lose their viewport.
        """
        visible = self.visible_bindings()
        if not visible:
            self.grid = None
            return None

        shape = allocate_grid(len(visible), self.settings.max_grid_dim)
        width, height = self.surface_size
        rects = viewport_rects([b.name for b in visible], shape, width, height)

        for binding in self.store:
            binding.viewport = rects.get(binding.name)
            if binding.viewport is not None:
                binding.physics.set_center(*binding.viewport.center)

        if self.grid != shape:
            logger.debug(
                "viewport grid %dx%d for %d topologies", shape.rows, shape.cols, len(visible)
            )
        self.grid = shape
        return shape
