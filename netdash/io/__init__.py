"""Snapshot I/O for netdash.

This module provides functionality for:
- Snapshot decoding (wire.py)
- JSON snapshot schemas (schemas.py)
- Snapshot encoding (exporter.py)
"""

from .exporter import encode_delta_tag, encode_json
from .wire import detect_format, parse_delta_tag, parse_json_snapshot, parse_snapshot

__all__ = [
    "detect_format",
    "parse_snapshot",
    "parse_delta_tag",
    "parse_json_snapshot",
    "encode_delta_tag",
    "encode_json",
]
