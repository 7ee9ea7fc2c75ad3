"""
Snapshot encoders for both wire formats.

These are the server-side counterpart of the wire parser, used to produce
fixture payloads and to re-serve a captured snapshot.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from netdash.configs.constants import (
    DEFAULT_LINK_INFO,
    DEFAULT_LINK_TYPE,
    FIELD_SEPARATOR,
    LINK_TAG,
    NODE_TAG,
    TOPOLOGY_TAG,
)
from netdash.domain.topology import Topology


def _join(*fields: object) -> str:
    return FIELD_SEPARATOR.join(str(field) for field in fields)


def encode_delta_tag(topologies: Mapping[str, Topology]) -> str:
    """
    Serialize topologies as delta-tag text.

    Default link type/info are written out explicitly.
    """
    lines: list[str] = []
    for name, topology in topologies.items():
        lines.append(_join(TOPOLOGY_TAG, name))
        for node_id, node in topology.nodes.items():
            fields: list[object] = [NODE_TAG, node_id]
            for endpoint in node.endpoints:
                fields.extend((endpoint.address, endpoint.name))
            lines.append(_join(*fields))
        for link in topology.links:
            lines.append(
                _join(LINK_TAG, link.source, link.target, link.id, link.type, link.info)
            )
    return "\n".join(lines) + "\n" if lines else ""


def topology_to_json_dict(topology: Topology) -> dict[str, Any]:
    """
    Build the JSON snapshot entry of one topology.

    :raises ValueError: If node ids are not contiguous from 0, since the
        JSON format encodes ids as array positions
    """
    node_ids = sorted(topology.nodes)
    if node_ids != list(range(len(node_ids))):
        raise ValueError(
            f"topology '{topology.name}' has non-contiguous node ids; "
            "the JSON format requires ids 0..n-1"
        )

    return {
        "nodes": [
            {
                "endpoints": [
                    {"address": ep.address, "name": ep.name}
                    for ep in topology.nodes[node_id].endpoints
                ]
            }
            for node_id in node_ids
        ],
        "routes": [
            {
                "source": link.source,
                "target": link.target,
                "id": link.id,
                "typestring": link.type or DEFAULT_LINK_TYPE,
                "info": link.info or DEFAULT_LINK_INFO,
            }
            for link in topology.links
        ],
    }


def encode_json(topologies: Mapping[str, Topology], indent: int | None = None) -> str:
    """Serialize topologies as a JSON snapshot."""
    return json.dumps(
        {name: topology_to_json_dict(topology) for name, topology in topologies.items()},
        indent=indent,
    )
