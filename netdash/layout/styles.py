"""Link style lookup table keyed by link type."""

from __future__ import annotations

from dataclasses import dataclass

from netdash.configs.constants import DEFAULT_LINK_TYPE


@dataclass(frozen=True)
class LinkStyle:
    """Rendering and physics parameters for one link type."""

    distance: float
    color: str
    strength: float


LINK_STYLES: dict[str, LinkStyle] = {
    "loopback": LinkStyle(distance=200, color="#00ff0011", strength=2),
    DEFAULT_LINK_TYPE: LinkStyle(distance=200, color="#ffff00aa", strength=2),
    "loopback_transport_route": LinkStyle(distance=400, color="#ff00ffaa", strength=0.5),
    "socket_server_transport_route": LinkStyle(
        distance=400, color="#ffaa00aa", strength=0.5
    ),
    "socket_client_transport_route": LinkStyle(
        distance=400, color="#ffaa00aa", strength=0.5
    ),
}


def resolve_link_style(link_type: str | None) -> LinkStyle:
    """
    Style for a link type, falling back to the ``unknown`` style.

    An unlisted type is a styling condition, never an error.
    """
    if not link_type:
        return LINK_STYLES[DEFAULT_LINK_TYPE]
    return LINK_STYLES.get(link_type, LINK_STYLES[DEFAULT_LINK_TYPE])
