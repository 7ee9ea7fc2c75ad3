"""Unit tests for netdash.layout.offsets module."""

import pytest

from netdash.domain.topology import Link
from netdash.layout.offsets import assign_offsets, group_offsets


def make_links(*pairs: tuple[int, int]) -> list[Link]:
    return [Link(source=s, target=t, id=str(i)) for i, (s, t) in enumerate(pairs)]


class TestGroupOffsets:
    """Tests for group_offsets."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (1, [0.0]),
            (2, [-0.5, 0.5]),
            (3, [-1.0, 0.0, 1.0]),
            (4, [-1.5, -0.5, 0.5, 1.5]),
        ],
    )
    def test_offsets_centered_on_zero(self, size: int, expected: list[float]) -> None:
        assert group_offsets(size) == expected


class TestAssignOffsets:
    """Tests for assign_offsets."""

    def test_single_link_gets_zero(self) -> None:
        links = make_links((0, 1))

        assign_offsets(links)

        assert links[0].offset == 0

    def test_three_parallel_links_fan_out(self) -> None:
        """Test three same-pair links get -1, 0, 1 in member order."""
        # Arrange
        links = make_links((0, 1), (0, 1), (0, 1))

        # Act
        assign_offsets(links)

        # Assert
        assert [link.offset for link in links] == [-1, 0, 1]

    def test_groups_are_independent_and_keep_member_order(self) -> None:
        """Test interleaved groups each get their own centered offsets."""
        # Arrange
        links = make_links((0, 1), (1, 2), (0, 1), (1, 2), (1, 2), (2, 0))

        # Act
        assign_offsets(links)

        # Assert
        assert [link.offset for link in links] == [-0.5, -1, 0.5, 0, 1, 0]

    def test_direction_matters_for_grouping(self) -> None:
        """Test that (a, b) and (b, a) are separate groups."""
        links = make_links((0, 1), (1, 0))

        assign_offsets(links)

        assert [link.offset for link in links] == [0, 0]

    def test_returns_same_sequence(self) -> None:
        links = make_links((0, 1))

        assert assign_offsets(links) is links

    def test_idempotent(self) -> None:
        """Test that a second pass reproduces the same offsets."""
        # Arrange
        links = make_links((0, 1), (0, 1), (3, 4), (0, 1))
        assign_offsets(links)
        first = [link.offset for link in links]

        # Act
        assign_offsets(links)

        # Assert
        assert [link.offset for link in links] == first

    def test_fully_assigned_group_is_not_adjusted(self) -> None:
        """Test that links already carrying offsets are left untouched."""
        # Arrange
        links = make_links((0, 1), (0, 1))
        links[0].offset = 7.0
        links[1].offset = 8.0

        # Act
        assign_offsets(links)

        # Assert
        assert [link.offset for link in links] == [7.0, 8.0]

    def test_partially_assigned_group_is_recomputed(self) -> None:
        """Test that a group with a new member is reassigned as a whole."""
        # Arrange
        links = make_links((0, 1), (0, 1))
        assign_offsets(links)
        links.append(Link(source=0, target=1, id="new"))

        # Act
        assign_offsets(links)

        # Assert
        assert [link.offset for link in links] == [-1, 0, 1]

    def test_offsets_match_multiset_for_larger_groups(self) -> None:
        """Test offset symmetry for groups of size 1..6."""
        for size in range(1, 7):
            links = make_links(*[(5, 6)] * size)

            assign_offsets(links)

            expected = {i - (size - 1) / 2 for i in range(size)}
            assert {link.offset for link in links} == expected
            assert sum(link.offset for link in links) == 0

    def test_empty_list(self) -> None:
        assert assign_offsets([]) == []
