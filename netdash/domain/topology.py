"""
Topology domain model.

This module defines the normalized in-memory shape every wire format
decodes into: endpoints hosted by nodes, typed links between node ids, and
named topologies grouping both.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import networkx as nx

from netdash.configs.constants import DEFAULT_LINK_INFO, DEFAULT_LINK_TYPE
from netdash.errors import MalformedSnapshotError


@dataclass(frozen=True)
class Endpoint:
    """Addressable endpoint hosted by a node."""

    address: str
    name: str


@dataclass
class Node:
    """
    Graph vertex hosting one or more endpoints.

    Position state is owned by the physics collaborator once the node is
    bound to one; it is ``None`` until seeded and never takes part in
    equality.

    Attributes:
        id: Non-negative integer, unique within its topology snapshot
        endpoints: Endpoints in wire order
        x, y: Current position
        vx, vy: Current velocity
        fx, fy: Pinned position, set while the user holds or has dropped the node
    """

    id: int
    endpoints: list[Endpoint] = field(default_factory=list)

    x: float | None = field(default=None, compare=False, repr=False)
    y: float | None = field(default=None, compare=False, repr=False)
    vx: float | None = field(default=None, compare=False, repr=False)
    vy: float | None = field(default=None, compare=False, repr=False)
    fx: float | None = field(default=None, compare=False, repr=False)
    fy: float | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate node identity."""
        if self.id < 0:
            raise ValueError(f"node id must be non-negative, got {self.id}")

    @property
    def has_position(self) -> bool:
        """True once the physics collaborator has placed the node."""
        return self.x is not None and self.y is not None

    @property
    def is_pinned(self) -> bool:
        return self.fx is not None and self.fy is not None

    def pin(self, x: float, y: float) -> None:
        self.fx = x
        self.fy = y

    def unpin(self) -> None:
        self.fx = None
        self.fy = None

    def label_length(self) -> int:
        """Length of the longest endpoint name, zero for a bare node."""
        return max((len(ep.name) for ep in self.endpoints), default=0)


@dataclass
class Link:
    """
    Typed route between two node ids.

    ``offset`` is derived by the edge offset calculator and does not take
    part in equality, so two decodings of the same snapshot compare equal
    regardless of when offsets were computed.
    """

    source: int
    target: int
    id: str
    type: str = DEFAULT_LINK_TYPE
    info: str = DEFAULT_LINK_INFO
    offset: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Normalize empty type and info to their defaults."""
        if not self.type:
            self.type = DEFAULT_LINK_TYPE
        if not self.info:
            self.info = DEFAULT_LINK_INFO

    @property
    def pair(self) -> tuple[int, int]:
        """Key used to group parallel links."""
        return (self.source, self.target)


def group_by_pair(links: Iterable[Link]) -> dict[tuple[int, int], list[Link]]:
    """Group links by (source, target) in first-seen order, keeping member order."""
    groups: dict[tuple[int, int], list[Link]] = {}
    for link in links:
        groups.setdefault(link.pair, []).append(link)
    return groups


@dataclass
class Topology:
    """
    One named network graph as delivered by a snapshot.

    Node ids are sparse; ``nodes`` maps id to node. ``links`` keeps wire
    order, which determines offset assignment.
    """

    name: str
    nodes: dict[int, Node] = field(default_factory=dict)
    links: list[Link] = field(default_factory=list)

    def validate(self) -> None:
        """
        Check that every link references nodes of this topology.

        :raises MalformedSnapshotError: On the first dangling reference
        """
        for link in self.links:
            for end in (link.source, link.target):
                if end not in self.nodes:
                    raise MalformedSnapshotError(
                        f"topology '{self.name}': link '{link.id}' references "
                        f"unknown node {end}"
                    )

    def pair_groups(self) -> dict[tuple[int, int], list[Link]]:
        """Group links by (source, target) in first-seen order."""
        return group_by_pair(self.links)

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Export the topology as a directed multigraph.

        Node attributes carry the endpoints; edges are keyed by link id and
        carry type, info and offset.
        """
        graph = nx.MultiDiGraph(name=self.name)
        for node_id, node in self.nodes.items():
            graph.add_node(node_id, endpoints=list(node.endpoints))
        for link in self.links:
            graph.add_edge(
                link.source,
                link.target,
                key=link.id,
                type=link.type,
                info=link.info,
                offset=link.offset,
            )
        return graph
