"""
Drag controller.

A pointer-down binds the gesture to the node nearest to the pointer across
every visible topology, moves pin that node to the pointer, and
pointer-up lets the layout settle while the node stays pinned.
"""

from __future__ import annotations

import logging
from enum import Enum

from netdash.core.context import DashboardContext, DragBinding
from netdash.core.store import TopologyBinding
from netdash.domain.topology import Node

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


def find_nearest_node(
    bindings: list[TopologyBinding], x: float, y: float
) -> tuple[Node, TopologyBinding] | None:
    """
    Node closest to (x, y) over all given topologies.

    Nodes without a position are skipped. Ties go to the first node
    encountered in topology order, then node order.
    """
    nearest: tuple[Node, TopologyBinding] | None = None
    best = float("inf")
    for binding in bindings:
        for node in binding.topology.nodes.values():
            if not node.has_position:
                continue
            distance = (node.x - x) ** 2 + (node.y - y) ** 2
            if distance < best:
                best = distance
                nearest = (node, binding)
    return nearest


class DragController:
    """Pointer gesture state machine over a dashboard context."""

    def __init__(self, context: DashboardContext) -> None:
        self._context = context

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._context.drag is None else DragState.DRAGGING

    @property
    def subject(self) -> Node | None:
        """Node held by the active gesture."""
        drag = self._context.drag
        return drag.node if drag is not None else None

    def pointer_down(self, x: float, y: float) -> Node | None:
        """
        Start a gesture on the nearest node.

        Clears the node's previous pin and raises the owning layout's
        energy target so it responds while dragging.

        :param x: Pointer x in simulation coordinates
        :param y: Pointer y in simulation coordinates
        :return: The bound node, None when no positioned node exists
        """
        if self._context.drag is not None:
            # pointer-up was lost (e.g. released outside the surface)
            logger.debug("pointer down during an active drag, releasing previous node")
            self._release(self._context.drag)

        found = find_nearest_node(self._context.visible_bindings(), x, y)
        if found is None:
            logger.debug("pointer down at (%.1f, %.1f) with no node to drag", x, y)
            return None

        node, binding = found
        self._context.drag = DragBinding(node=node, binding=binding)
        node.unpin()
        binding.physics.set_alpha_target(self._context.settings.drag_alpha_target)
        binding.physics.restart()
        logger.debug("dragging node %d of '%s'", node.id, binding.name)
        return node

    def pointer_move(self, x: float, y: float) -> None:
        """Pin the held node to the pointer."""
        drag = self._context.drag
        if drag is None:
            return

        if not self._is_live(drag):
            logger.info(
                "node %d of '%s' vanished mid-drag, releasing gesture",
                drag.node.id,
                drag.binding.name,
            )
            self._release(drag)
            return

        drag.node.pin(x, y)

    def pointer_up(self) -> None:
        """End the gesture; the node keeps its pinned position."""
        drag = self._context.drag
        if drag is None:
            return
        self._release(drag)

    def _release(self, drag: DragBinding) -> None:
        drag.binding.physics.set_alpha_target(0.0)
        self._context.drag = None

    def _is_live(self, drag: DragBinding) -> bool:
        binding = self._context.store.get(drag.binding.name)
        if binding is not drag.binding:
            return False
        return binding.topology.nodes.get(drag.node.id) is drag.node
