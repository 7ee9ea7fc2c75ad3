"""Unit tests for netdash.io.exporter module."""

import json

import pytest

from netdash.domain.topology import Endpoint, Link, Node, Topology
from netdash.io.exporter import encode_delta_tag, encode_json, topology_to_json_dict
from netdash.io.wire import parse_delta_tag, parse_json_snapshot


@pytest.fixture
def topologies() -> dict[str, Topology]:
    nodes = {
        0: Node(id=0, endpoints=[Endpoint("1", "gateway")]),
        1: Node(id=1, endpoints=[Endpoint("2", "probe"), Endpoint("3", "probe-2")]),
    }
    links = [
        Link(source=0, target=1, id="7", type="loopback_transport_route"),
        Link(source=0, target=1, id="8", info="tcp://10.0.0.2"),
    ]
    return {"site": Topology(name="site", nodes=nodes, links=links)}


class TestEncodeDeltaTag:
    """Tests for encode_delta_tag."""

    def test_writes_one_record_per_line(self, topologies) -> None:
        """Test the exact record layout of the line format."""
        # Act
        text = encode_delta_tag(topologies)

        # Assert
        assert text.splitlines() == [
            ":$site",
            "#$0$1$gateway",
            "#$1$2$probe$3$probe-2",
            "~$0$1$7$loopback_transport_route$<empty>",
            "~$0$1$8$unknown$tcp://10.0.0.2",
        ]

    def test_output_parses_back(self, topologies) -> None:
        assert parse_delta_tag(encode_delta_tag(topologies)) == topologies

    def test_sparse_ids_are_kept(self) -> None:
        topology = Topology(name="s", nodes={4: Node(id=4), 9: Node(id=9)})

        assert encode_delta_tag({"s": topology}) == ":$s\n#$4\n#$9\n"

    def test_no_topologies_encodes_empty(self) -> None:
        assert encode_delta_tag({}) == ""


class TestEncodeJson:
    """Tests for encode_json and topology_to_json_dict."""

    def test_routes_use_typestring(self, topologies) -> None:
        entry = topology_to_json_dict(topologies["site"])

        assert entry["routes"][0]["typestring"] == "loopback_transport_route"
        assert "type" not in entry["routes"][0]

    def test_nodes_are_positional(self, topologies) -> None:
        decoded = json.loads(encode_json(topologies))

        assert decoded["site"]["nodes"][1]["endpoints"][0] == {"address": "2", "name": "probe"}

    def test_output_parses_back(self, topologies) -> None:
        assert parse_json_snapshot(encode_json(topologies, indent=2)) == topologies

    def test_sparse_ids_rejected(self) -> None:
        topology = Topology(name="s", nodes={0: Node(id=0), 2: Node(id=2)})

        with pytest.raises(ValueError, match="non-contiguous"):
            encode_json({"s": topology})
