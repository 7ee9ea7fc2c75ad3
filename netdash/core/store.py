"""
Topology store.

Holds, per topology name, the live node/link model and the physics and
viewport bindings attached to it. Snapshots update the model in place so
the physics collaborator keeps continuity of motion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from netdash.domain.topology import Node, Topology
from netdash.interfaces.physics import AbstractPhysicsSimulation, PhysicsFactory
from netdash.layout.grid import Viewport
from netdash.utils.logging_config import LoggerAdapter

logger = logging.getLogger(__name__)


@dataclass
class TopologyBinding:
    """Live topology plus the collaborators bound to it."""

    name: str
    topology: Topology
    physics: AbstractPhysicsSimulation
    viewport: Viewport | None = None


class TopologyStore:
    """Topology bindings keyed by name, in first-seen order."""

    def __init__(self, physics_factory: PhysicsFactory) -> None:
        """
        :param physics_factory: Creates the physics collaborator of a newly
            seen topology from its name
        """
        self._physics_factory = physics_factory
        self._bindings: dict[str, TopologyBinding] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[TopologyBinding]:
        return iter(list(self._bindings.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def names(self) -> list[str]:
        return list(self._bindings)

    def get(self, name: str) -> TopologyBinding | None:
        return self._bindings.get(name)

    def nodes_of(self, name: str) -> dict[int, Node]:
        """
        Current nodes of a topology.

        :raises KeyError: If the topology has never been seen
        """
        return self._bindings[name].topology.nodes

    def upsert(self, name: str, parsed: Topology) -> TopologyBinding:
        """
        Create or update the binding of a topology.

        On first sight the parsed topology becomes the live one and a fresh
        physics collaborator is bound to it. Afterwards the live node dict
        and link list keep their identity: surviving node ids keep their
        node object (and its position state) with endpoints refreshed, new
        ids are added unpositioned and vanished ids are dropped.
        """
        binding = self._bindings.get(name)
        if binding is None:
            physics = self._physics_factory(name)
            binding = TopologyBinding(name=name, topology=parsed, physics=physics)
            physics.bind(parsed.nodes, parsed.links)
            self._bindings[name] = binding
            logger.info(
                "new topology '%s' with %d nodes and %d links",
                name,
                len(parsed.nodes),
                len(parsed.links),
            )
            return binding

        live = binding.topology
        merged: dict[int, Node] = {}
        for node_id, node in parsed.nodes.items():
            existing = live.nodes.get(node_id)
            if existing is None:
                merged[node_id] = node
            else:
                existing.endpoints = list(node.endpoints)
                merged[node_id] = existing

        log = LoggerAdapter(logger, {"topology": name})
        removed = set(live.nodes) - set(merged)
        if removed:
            log.debug("dropping vanished node ids %s", sorted(removed))
        added = set(merged) - set(live.nodes)
        if added:
            log.debug("adding node ids %s", sorted(added))

        live.nodes.clear()
        live.nodes.update(merged)
        live.links[:] = parsed.links
        binding.physics.bind(live.nodes, live.links)
        return binding

    def commit(self, snapshot: Mapping[str, Topology]) -> list[str]:
        """
        Upsert every topology of a parsed snapshot.

        :return: Names seen for the first time, in snapshot order
        """
        created = [name for name in snapshot if name not in self._bindings]
        for name, topology in snapshot.items():
            self.upsert(name, topology)
        return created

    def remove(self, name: str) -> TopologyBinding | None:
        binding = self._bindings.pop(name, None)
        if binding is not None:
            logger.info("removed stale topology '%s'", name)
        return binding
