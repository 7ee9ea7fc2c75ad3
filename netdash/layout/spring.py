"""
Reference physics collaborator backed by networkx's spring layout.

Each tick runs one Fruchterman-Reingold iteration over the bound topology,
keeps pinned nodes fixed, blends the result into the current positions by
the simulation's energy (alpha) and recenters the layout. Alpha decays
toward its target and integration stops once it cools below ``alpha_min``.
"""

from __future__ import annotations

import logging
import math

import networkx as nx
import numpy as np

from netdash.domain.topology import Link, Node
from netdash.interfaces.physics import AbstractPhysicsSimulation, TickCallback
from netdash.layout.styles import resolve_link_style
from netdash.utils.logging_config import LoggerAdapter

logger = logging.getLogger(__name__)

INITIAL_RADIUS = 10.0
INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))
DEFAULT_ALPHA_MIN = 0.001


class SpringLayoutSimulation(AbstractPhysicsSimulation):
    """Force-directed layout of one topology."""

    def __init__(
        self,
        name: str = "",
        alpha_min: float = DEFAULT_ALPHA_MIN,
        alpha_decay: float | None = None,
        seed: int = 42,
    ) -> None:
        """
        Initialize an unbound simulation.

        :param name: Topology name, used for log context
        :param alpha_min: Energy below which integration stops
        :param alpha_decay: Per-tick decay rate toward the alpha target;
            defaults to cooling from 1 to ``alpha_min`` in 300 ticks
        :param seed: Random seed handed to the spring layout
        """
        self.name = name
        self._log = LoggerAdapter(logger, {"topology": name})
        self._nodes: dict[int, Node] = {}
        self._links: list[Link] = []
        self._center = (0.0, 0.0)
        self._alpha = 1.0
        self._alpha_target = 0.0
        self._alpha_min = alpha_min
        self._alpha_decay = (
            alpha_decay if alpha_decay is not None else 1 - alpha_min ** (1 / 300)
        )
        self._seed = seed
        self._callbacks: list[TickCallback] = []
        self._running = True

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def alpha_target(self) -> float:
        return self._alpha_target

    @property
    def running(self) -> bool:
        return self._running

    @property
    def center(self) -> tuple[float, float]:
        return self._center

    def bind(self, nodes: dict[int, Node], links: list[Link]) -> None:
        self._nodes = nodes
        self._links = links
        self._seed_positions()
        self._log.debug("bound %d nodes and %d links", len(nodes), len(links))

    def set_center(self, x: float, y: float) -> None:
        self._center = (x, y)

    def restart(self, alpha: float | None = None) -> None:
        if alpha is not None:
            self._alpha = alpha
        self._running = True

    def set_alpha_target(self, value: float) -> None:
        self._alpha_target = value

    def on_tick(self, callback: TickCallback) -> None:
        self._callbacks.append(callback)

    def tick(self) -> bool:
        if not self._running:
            return False

        self._alpha += (self._alpha_target - self._alpha) * self._alpha_decay
        self._seed_positions()
        self._step()

        for callback in self._callbacks:
            callback()

        if self._alpha < self._alpha_min:
            self._running = False
            self._log.debug("layout cooled down")
        return self._running

    def _seed_positions(self) -> None:
        """Place unpositioned nodes on a phyllotaxis spiral around the center."""
        unplaced = [node for node in self._nodes.values() if not node.has_position]
        if not unplaced:
            return

        index = np.arange(len(unplaced))
        radius = INITIAL_RADIUS * np.sqrt(0.5 + index)
        angle = index * INITIAL_ANGLE
        xs = self._center[0] + radius * np.cos(angle)
        ys = self._center[1] + radius * np.sin(angle)

        for node, x, y in zip(unplaced, xs, ys):
            if node.is_pinned:
                node.x, node.y = node.fx, node.fy
            else:
                node.x, node.y = float(x), float(y)
            node.vx = node.vy = 0.0

    def _step(self) -> None:
        nodes = list(self._nodes.values())
        for node in nodes:
            if node.is_pinned:
                node.x, node.y = node.fx, node.fy
                node.vx = node.vy = 0.0

        free = [node for node in nodes if not node.is_pinned]
        if len(nodes) >= 2:
            layout = nx.spring_layout(
                self._graph(),
                k=self._spring_length(),
                pos={node.id: (node.x, node.y) for node in nodes},
                fixed=[node.id for node in nodes if node.is_pinned] or None,
                iterations=1,
                weight="weight",
                scale=None,
                seed=self._seed,
            )
            for node in free:
                target_x, target_y = layout[node.id]
                node.vx = (float(target_x) - node.x) * self._alpha
                node.vy = (float(target_y) - node.y) * self._alpha
                node.x += node.vx
                node.y += node.vy

        # a lone node has no forces acting on it but still follows the center
        if free:
            mean = np.mean([(node.x, node.y) for node in nodes], axis=0)
            shift_x = self._center[0] - float(mean[0])
            shift_y = self._center[1] - float(mean[1])
            for node in free:
                node.x += shift_x
                node.y += shift_y

    def _graph(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(self._nodes)
        for link in self._links:
            if link.source == link.target:
                continue
            if link.source not in self._nodes or link.target not in self._nodes:
                continue
            strength = resolve_link_style(link.type).strength
            if graph.has_edge(link.source, link.target):
                strength = max(strength, graph[link.source][link.target]["weight"])
            graph.add_edge(link.source, link.target, weight=strength)
        return graph

    def _spring_length(self) -> float:
        """Optimal node distance: mean style distance of the bound links."""
        if not self._links:
            return resolve_link_style(None).distance
        return float(
            np.mean([resolve_link_style(link.type).distance for link in self._links])
        )
