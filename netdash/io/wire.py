"""
Wire parser for topology snapshots.

Two serializations are in use by snapshot servers:

- the delta-tag line format, one ``$``-separated record per line::

      :$<name>
      #$<id>$<addr1>$<name1>$<addr2>$<name2>...
      ~$<source>$<target>$<id>[$<type>[$<info>]]

- the JSON snapshot format, a mapping of topology name to ``nodes`` (array
  position is the node id) and ``routes`` (``typestring`` names the type).

Both decode into ``dict[str, Topology]`` with validated references and
fan offsets assigned.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from netdash.configs.constants import (
    FIELD_SEPARATOR,
    LINK_TAG,
    NODE_TAG,
    TOPOLOGY_TAG,
)
from netdash.configs.settings import WireFormat
from netdash.domain.topology import Endpoint, Link, Node, Topology
from netdash.errors import MalformedSnapshotError
from netdash.io.schemas import SnapshotTopology
from netdash.layout.offsets import assign_offsets

logger = logging.getLogger(__name__)

_SNAPSHOT_ADAPTER = TypeAdapter(dict[str, SnapshotTopology])


def detect_format(raw: str) -> WireFormat:
    """
    Detect the serialization of a payload.

    JSON snapshots are objects, so a payload whose first non-blank
    character is ``{`` is JSON; everything else is delta-tag text.
    """
    stripped = raw.lstrip()
    if stripped.startswith("{"):
        return WireFormat.JSON
    return WireFormat.DELTA_TAG


def parse_snapshot(
    raw: str, wire_format: WireFormat = WireFormat.AUTO
) -> dict[str, Topology]:
    """
    Decode a snapshot payload into topologies keyed by name.

    :param raw: Payload text
    :param wire_format: Serialization, detected from the payload when AUTO
    :return: Topologies in first-seen order, offsets assigned
    :raises MalformedSnapshotError: If the payload is structurally invalid
    """
    if wire_format is WireFormat.AUTO:
        wire_format = detect_format(raw)

    if wire_format is WireFormat.JSON:
        return parse_json_snapshot(raw)
    return parse_delta_tag(raw)


def _parse_int(value: str, what: str, line_number: int) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedSnapshotError(
            f"{what} is not an integer: {value!r}", line_number
        ) from None


def _parse_node(fields: list[str], line_number: int) -> Node:
    if len(fields) < 2 or fields[1] == "":
        raise MalformedSnapshotError("node record without id", line_number)

    node_id = _parse_int(fields[1], "node id", line_number)
    if node_id < 0:
        raise MalformedSnapshotError(f"negative node id {node_id}", line_number)

    endpoint_fields = fields[2:]
    if len(endpoint_fields) % 2:
        raise MalformedSnapshotError(
            f"node {node_id}: endpoint address without name", line_number
        )

    endpoints = [
        Endpoint(address=address, name=name)
        for address, name in zip(endpoint_fields[0::2], endpoint_fields[1::2])
    ]
    return Node(id=node_id, endpoints=endpoints)


def _parse_link(fields: list[str], line_number: int) -> Link:
    if len(fields) < 4:
        raise MalformedSnapshotError(
            "link record needs source, target and id", line_number
        )

    return Link(
        source=_parse_int(fields[1], "link source", line_number),
        target=_parse_int(fields[2], "link target", line_number),
        id=fields[3],
        type=fields[4] if len(fields) > 4 else "",
        info=fields[5] if len(fields) > 5 else "",
    )


def parse_delta_tag(raw: str) -> dict[str, Topology]:
    """
    Decode the delta-tag line format.

    Records apply in file order. A node record for an id already seen in
    the block replaces that node. A second block with a name already seen
    replaces the earlier block entirely.

    :raises MalformedSnapshotError: On bad integers, missing fields, records
        outside a topology block or dangling link references
    """
    topologies: dict[str, Topology] = {}
    current: Topology | None = None

    for line_number, line in enumerate(raw.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line:
            continue

        fields = line.split(FIELD_SEPARATOR)
        tag = fields[0]

        if tag == TOPOLOGY_TAG:
            if len(fields) < 2 or not fields[1]:
                raise MalformedSnapshotError("topology record without name", line_number)
            name = fields[1]
            if name in topologies:
                logger.debug("topology '%s' redefined on line %d", name, line_number)
            current = Topology(name=name)
            topologies[name] = current

        elif tag in (NODE_TAG, LINK_TAG):
            if current is None:
                raise MalformedSnapshotError(
                    "record outside of a topology block", line_number
                )
            if tag == NODE_TAG:
                node = _parse_node(fields, line_number)
                current.nodes[node.id] = node
            else:
                current.links.append(_parse_link(fields, line_number))

        else:
            logger.debug("ignoring record with unknown tag %r on line %d", tag, line_number)

    return _finalize(topologies)


def parse_json_snapshot(raw: str) -> dict[str, Topology]:
    """
    Decode the JSON snapshot format.

    ``typestring`` is normalized to ``Link.type``; numeric endpoint
    addresses and route ids become strings. Transmitted offsets are
    ignored, offsets are always derived.

    :raises MalformedSnapshotError: On invalid JSON, schema violations or
        dangling link references
    """
    try:
        decoded = _SNAPSHOT_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise MalformedSnapshotError(f"invalid JSON snapshot: {e}") from e

    topologies: dict[str, Topology] = {}
    for name, entry in decoded.items():
        nodes = {
            node_id: Node(
                id=node_id,
                endpoints=[
                    Endpoint(address=ep.address, name=ep.name) for ep in node.endpoints
                ],
            )
            for node_id, node in enumerate(entry.nodes)
        }
        links = [
            Link(
                source=route.source,
                target=route.target,
                id=route.id,
                type=route.typestring or "",
                info=route.info or "",
            )
            for route in entry.routes
        ]
        topologies[name] = Topology(name=name, nodes=nodes, links=links)

    return _finalize(topologies)


def _finalize(topologies: dict[str, Topology]) -> dict[str, Topology]:
    for topology in topologies.values():
        topology.validate()
        assign_offsets(topology.links)
    return topologies
