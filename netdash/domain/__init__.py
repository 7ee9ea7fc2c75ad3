"""
netdash domain model package.

- Endpoint: address/name pair hosted by a node
- Node: graph vertex with mutable position state
- Link: typed route between two node ids, with derived fan offset
- Topology: one named graph from a snapshot
"""

from netdash.domain.topology import Endpoint, Link, Node, Topology, group_by_pair

__all__ = [
    "Endpoint",
    "Link",
    "Node",
    "Topology",
    "group_by_pair",
]
