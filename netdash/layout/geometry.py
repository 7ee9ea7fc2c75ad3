"""
Geometry helpers for drawing fanned links and endpoint-labelled nodes.
"""

from __future__ import annotations

import math

from netdash.configs.constants import (
    ENDPOINT_ROW_HEIGHT,
    ENDPOINT_ROW_PADDING,
    LINK_OFFSET_SPACING,
)
from netdash.domain.topology import Link, Node

FONT_SCALE = 0.5
TEXT_HEIGHT_SCALE = 0.75
GLYPH_WIDTH_SCALE = 0.6


def fan_displacement(
    source_xy: tuple[float, float],
    target_xy: tuple[float, float],
    offset: float,
    spacing: float = LINK_OFFSET_SPACING,
) -> tuple[float, float]:
    """
    Perpendicular displacement applied to both ends of a fanned link.

    :param source_xy: Source node position
    :param target_xy: Target node position
    :param offset: Link offset from the edge offset calculator
    :param spacing: Distance between neighbouring links of one fan
    :return: (dx, dy) to add to both line ends; zero for a centered link or
        coincident endpoints
    """
    delta_x = source_xy[0] - target_xy[0]
    delta_y = source_xy[1] - target_xy[1]
    length = math.hypot(delta_x, delta_y)
    if offset == 0 or length == 0:
        return (0.0, 0.0)

    magnitude = offset * spacing
    return (delta_y * magnitude / length, -delta_x * magnitude / length)


def link_segment(
    link: Link, nodes: dict[int, Node], spacing: float = LINK_OFFSET_SPACING
) -> tuple[float, float, float, float] | None:
    """
    Line coordinates (x1, y1, x2, y2) of a link with its fan offset applied.

    Returns None while either end has no position yet.
    """
    source = nodes.get(link.source)
    target = nodes.get(link.target)
    if source is None or target is None or not (source.has_position and target.has_position):
        return None

    shift_x, shift_y = fan_displacement(
        (source.x, source.y), (target.x, target.y), link.offset or 0.0, spacing
    )
    return (
        source.x + shift_x,
        source.y + shift_y,
        target.x + shift_x,
        target.y + shift_y,
    )


def node_extent(
    node: Node,
    row_height: float = ENDPOINT_ROW_HEIGHT,
    padding: float = ENDPOINT_ROW_PADDING,
) -> tuple[float, float]:
    """
    Width and height of a node drawn as one pill per endpoint.

    Width grows with the longest endpoint name; height with the endpoint count.
    """
    font_size = row_height * FONT_SCALE
    text_height = font_size * TEXT_HEIGHT_SCALE
    text_width = node.label_length() * font_size * GLYPH_WIDTH_SCALE
    width = text_width + row_height - text_height
    height = (row_height + padding) * len(node.endpoints)
    return (width, height)
