"""Unit tests for netdash.domain.topology module."""

import networkx as nx
import pytest

from netdash.domain.topology import Endpoint, Link, Node, Topology, group_by_pair
from netdash.errors import MalformedSnapshotError


@pytest.fixture
def triangle() -> Topology:
    """Three nodes, two parallel links 0->1 and one link 1->2."""
    nodes = {
        0: Node(id=0, endpoints=[Endpoint("1", "alpha")]),
        1: Node(id=1, endpoints=[Endpoint("2", "beta"), Endpoint("3", "gamma-long")]),
        2: Node(id=2),
    }
    links = [
        Link(source=0, target=1, id="a", type="loopback"),
        Link(source=0, target=1, id="b"),
        Link(source=1, target=2, id="c"),
    ]
    return Topology(name="net", nodes=nodes, links=links)


class TestNode:
    """Tests for Node."""

    def test_negative_id_raises_value_error(self) -> None:
        """Test that node ids must be non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            Node(id=-1)

    def test_position_state_excluded_from_equality(self) -> None:
        """Test that nodes with different positions still compare equal."""
        # Arrange
        first = Node(id=3, endpoints=[Endpoint("7", "ep")])
        second = Node(id=3, endpoints=[Endpoint("7", "ep")])
        first.x, first.y = 10.0, 20.0
        second.fx, second.fy = 1.0, 1.0

        # Assert
        assert first == second

    def test_pin_and_unpin(self) -> None:
        """Test pinning sets and unpinning clears fx/fy."""
        node = Node(id=0)

        node.pin(4.0, 5.0)
        assert node.is_pinned
        assert (node.fx, node.fy) == (4.0, 5.0)

        node.unpin()
        assert not node.is_pinned

    def test_has_position_false_until_seeded(self) -> None:
        node = Node(id=0)
        assert not node.has_position

        node.x, node.y = 0.0, 0.0
        assert node.has_position

    def test_label_length_uses_longest_endpoint_name(self, triangle: Topology) -> None:
        assert triangle.nodes[1].label_length() == len("gamma-long")
        assert triangle.nodes[2].label_length() == 0


class TestLink:
    """Tests for Link."""

    def test_defaults(self) -> None:
        """Test that type and info default when omitted."""
        link = Link(source=0, target=1, id="x")

        assert link.type == "unknown"
        assert link.info == "<empty>"
        assert link.offset is None

    def test_empty_type_and_info_normalize_to_defaults(self) -> None:
        link = Link(source=0, target=1, id="x", type="", info="")

        assert link.type == "unknown"
        assert link.info == "<empty>"

    def test_offset_excluded_from_equality(self) -> None:
        first = Link(source=0, target=1, id="x", offset=0.5)
        second = Link(source=0, target=1, id="x")

        assert first == second

    def test_pair_is_source_target(self) -> None:
        assert Link(source=4, target=2, id="x").pair == (4, 2)


class TestTopology:
    """Tests for Topology."""

    def test_validate_accepts_consistent_topology(self, triangle: Topology) -> None:
        triangle.validate()

    def test_validate_rejects_dangling_target(self, triangle: Topology) -> None:
        """Test that a link to an unknown node id is malformed."""
        # Arrange
        triangle.links.append(Link(source=2, target=9, id="bad"))

        # Act & Assert
        with pytest.raises(MalformedSnapshotError, match="unknown node 9"):
            triangle.validate()

    def test_validate_rejects_dangling_source(self, triangle: Topology) -> None:
        triangle.links.append(Link(source=5, target=0, id="bad"))

        with pytest.raises(MalformedSnapshotError, match="unknown node 5"):
            triangle.validate()

    def test_pair_groups_preserve_first_seen_order(self, triangle: Topology) -> None:
        groups = triangle.pair_groups()

        assert list(groups) == [(0, 1), (1, 2)]
        assert [link.id for link in groups[(0, 1)]] == ["a", "b"]

    def test_group_by_pair_accepts_any_iterable(self) -> None:
        pairs = [(0, 1), (1, 0), (0, 1)]
        links = (Link(source=s, target=t, id=str(i)) for i, (s, t) in enumerate(pairs))

        groups = group_by_pair(links)

        assert [[link.id for link in group] for group in groups.values()] == [["0", "2"], ["1"]]

    def test_to_networkx_exports_multigraph(self, triangle: Topology) -> None:
        """Test export keeps parallel links and node endpoints."""
        # Act
        graph = triangle.to_networkx()

        # Assert
        assert isinstance(graph, nx.MultiDiGraph)
        assert graph.number_of_nodes() == 3
        assert graph.number_of_edges() == 3
        assert graph.number_of_edges(0, 1) == 2
        assert graph.edges[0, 1, "a"]["type"] == "loopback"
        assert graph.nodes[1]["endpoints"][1].name == "gamma-long"
        assert graph.graph["name"] == "net"
