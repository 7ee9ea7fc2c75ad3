"""
Edge offset calculator.

Parallel links between the same (source, target) pair get consecutive
offsets centered on zero so they render as a fan instead of overlapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from netdash.domain.topology import Link, group_by_pair


def group_offsets(size: int) -> list[float]:
    """
    Offsets for a group of ``size`` parallel links, in member order.

    :param size: Number of links sharing one pair
    :return: ``[i - (size - 1) / 2 for i in range(size)]``
    """
    start = -(size - 1) / 2
    return [start + i for i in range(size)]


def assign_offsets(links: Sequence[Link]) -> Sequence[Link]:
    """
    Populate ``offset`` on every link, in place.

    Links are grouped by (source, target) in first-seen order, members keep
    their order within a group. A group whose members all carry an offset
    already is left as is, so calling this again within one processing
    cycle never adjusts a link twice.

    :param links: Links in wire order
    :return: The same sequence, offsets populated
    """
    for members in group_by_pair(links).values():
        if all(link.offset is not None for link in members):
            continue
        for link, offset in zip(members, group_offsets(len(members))):
            link.offset = offset

    return links

