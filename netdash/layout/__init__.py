"""
Layout package for netdash.

This package provides:
- Link fan offsets (offsets.py)
- Link style lookup (styles.py)
- Link and node geometry (geometry.py)
- Viewport grid allocation (grid.py)
- Reference spring-layout physics (spring.py)
"""

from .grid import GridShape, Viewport, allocate_grid, viewport_rects
from .offsets import assign_offsets, group_offsets
from .spring import SpringLayoutSimulation
from .styles import LINK_STYLES, LinkStyle, resolve_link_style

__all__ = [
    "GridShape",
    "Viewport",
    "allocate_grid",
    "viewport_rects",
    "assign_offsets",
    "group_offsets",
    "SpringLayoutSimulation",
    "LINK_STYLES",
    "LinkStyle",
    "resolve_link_style",
]
