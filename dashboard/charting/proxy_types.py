"""Canonical proxy types and the fixed slice palette.

Colors are a deterministic function of the category name so charts stay
visually stable across refreshes. A protocol is added by declaring one enum
member and one palette entry.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class ProxyType(StrEnum):
    """Proxy (tunnel) protocol classes reported by frps.

    Declaration order is the canonical chart order.
    """

    tcp = "tcp"
    udp = "udp"
    http = "http"
    https = "https"
    stcp = "stcp"
    sudp = "sudp"
    xtcp = "xtcp"


CANONICAL_PROXY_TYPES: Final[tuple[ProxyType, ...]] = tuple(ProxyType)

PROXY_TYPE_COLORS: Final[dict[ProxyType, str]] = {
    ProxyType.tcp: "#5470c6",
    ProxyType.udp: "#91cc75",
    ProxyType.http: "#fac858",
    ProxyType.https: "#ee6666",
    ProxyType.stcp: "#73c0de",
    ProxyType.sudp: "#3ba272",
    ProxyType.xtcp: "#fc8452",
}

INGRESS_TRAFFIC_COLOR: Final[str] = "#91cc75"
EGRESS_TRAFFIC_COLOR: Final[str] = "#5470c6"


def proxy_type_color(proxy_type: ProxyType) -> str:
    """Return the fixed slice color for a proxy type."""

    return PROXY_TYPE_COLORS[proxy_type]


def _validate_palette() -> None:
    """Fail fast when the palette and the enum drift apart."""

    missing = [p.value for p in CANONICAL_PROXY_TYPES if p not in PROXY_TYPE_COLORS]
    if missing:
        raise RuntimeError(f"Missing slice colors for proxy types: {', '.join(missing)}.")


_validate_palette()
