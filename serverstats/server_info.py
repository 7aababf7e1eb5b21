"""Best-effort parsing of the frps `/api/serverinfo` payload.

This module is intentionally:
- pure (no Django imports, no network access),
- defensive (never raises on malformed numbers; they become zero),
- minimal (only the fields the dashboard displays).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Final

ProxyTypeCounts = Mapping[str, int]

# frps reports counters as int64.
MAX_COUNTER: Final[int] = 2**63 - 1


@dataclass(frozen=True, slots=True)
class TrafficStats:
    """Aggregate server traffic counters.

    Args:
        ingress_bytes: Bytes received from proxied connections.
        egress_bytes: Bytes sent to proxied connections.
    """

    ingress_bytes: int
    egress_bytes: int

    @property
    def total_bytes(self) -> int:
        """Return the combined ingress and egress byte count."""

        return self.ingress_bytes + self.egress_bytes


@dataclass(frozen=True, slots=True)
class ServerInfo:
    """Normalized frps server info snapshot.

    Numeric fields are always non-negative integers. `proxy_type_count` keys
    are lowercased protocol names exactly as reported by the server.
    """

    version: str = ""
    bind_port: int = 0
    vhost_http_port: int = 0
    vhost_https_port: int = 0
    tcpmux_http_connect_port: int = 0
    kcp_bind_port: int = 0
    quic_bind_port: int = 0
    subdomain_host: str = ""
    max_pool_count: int = 0
    max_ports_per_client: int = 0
    heartbeat_timeout: int = 0
    allow_ports: str = ""
    tls_force: bool = False
    total_traffic_in: int = 0
    total_traffic_out: int = 0
    cur_conns: int = 0
    client_counts: int = 0
    proxy_type_count: Mapping[str, int] = field(default_factory=dict)

    def traffic(self) -> TrafficStats:
        """Return the traffic counters as a TrafficStats value."""

        return TrafficStats(ingress_bytes=self.total_traffic_in, egress_bytes=self.total_traffic_out)

    def proxy_type_counts(self) -> ProxyTypeCounts:
        """Return a copy of the per-protocol proxy counts."""

        return dict(self.proxy_type_count)

    def as_json(self) -> dict[str, Any]:
        """Return the snapshot using the frps JSON field names."""

        return {
            "version": self.version,
            "bindPort": self.bind_port,
            "vhostHTTPPort": self.vhost_http_port,
            "vhostHTTPSPort": self.vhost_https_port,
            "tcpmuxHTTPConnectPort": self.tcpmux_http_connect_port,
            "kcpBindPort": self.kcp_bind_port,
            "quicBindPort": self.quic_bind_port,
            "subdomainHost": self.subdomain_host,
            "maxPoolCount": self.max_pool_count,
            "maxPortsPerClient": self.max_ports_per_client,
            "heartbeatTimeout": self.heartbeat_timeout,
            "allowPortsStr": self.allow_ports,
            "tlsForce": self.tls_force,
            "totalTrafficIn": self.total_traffic_in,
            "totalTrafficOut": self.total_traffic_out,
            "curConns": self.cur_conns,
            "clientCounts": self.client_counts,
            "proxyTypeCount": dict(self.proxy_type_count),
        }


def coerce_count(value: object) -> int:
    """Coerce a raw counter value into a non-negative integer.

    Args:
        value: Raw value (int, float, numeric string, or anything else).

    Returns:
        The integer value floored at zero; 0 for non-numeric input or values
        beyond MAX_COUNTER.

    Notes:
        Booleans are not counters and coerce to 0. The magnitude is checked
        before converting, so huge exponents never expand into big integers.
    """

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if 0 <= value <= MAX_COUNTER else 0
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return 0
    if not number.is_finite() or number.adjusted() > 18:
        return 0
    count = int(number)
    return count if 0 <= count <= MAX_COUNTER else 0


def parse_proxy_type_counts(raw: object) -> dict[str, int]:
    """Parse a `proxyTypeCount` mapping into lowercased, non-negative counts.

    Args:
        raw: Mapping of protocol name to count. Non-mappings yield `{}`.

    Returns:
        Dict keyed by lowercased protocol name.
    """

    if not isinstance(raw, Mapping):
        return {}
    counts: dict[str, int] = {}
    for key, value in raw.items():
        name = str(key).strip().lower()
        if not name:
            continue
        counts[name] = counts.get(name, 0) + coerce_count(value)
    return counts


def parse_server_info(payload: Mapping[str, Any]) -> ServerInfo:
    """Parse a decoded `/api/serverinfo` JSON object.

    Args:
        payload: Decoded JSON object returned by the frps dashboard API.

    Returns:
        ServerInfo where missing or malformed fields take their defaults.
    """

    return ServerInfo(
        version=str(payload.get("version") or ""),
        bind_port=coerce_count(payload.get("bindPort")),
        vhost_http_port=coerce_count(payload.get("vhostHTTPPort")),
        vhost_https_port=coerce_count(payload.get("vhostHTTPSPort")),
        tcpmux_http_connect_port=coerce_count(payload.get("tcpmuxHTTPConnectPort")),
        kcp_bind_port=coerce_count(payload.get("kcpBindPort")),
        quic_bind_port=coerce_count(payload.get("quicBindPort")),
        subdomain_host=str(payload.get("subdomainHost") or ""),
        max_pool_count=coerce_count(payload.get("maxPoolCount")),
        max_ports_per_client=coerce_count(payload.get("maxPortsPerClient")),
        heartbeat_timeout=coerce_count(payload.get("heartbeatTimeout")),
        allow_ports=str(payload.get("allowPortsStr") or ""),
        tls_force=payload.get("tlsForce") is True,
        total_traffic_in=coerce_count(payload.get("totalTrafficIn")),
        total_traffic_out=coerce_count(payload.get("totalTrafficOut")),
        cur_conns=coerce_count(payload.get("curConns")),
        client_counts=coerce_count(payload.get("clientCounts")),
        proxy_type_count=parse_proxy_type_counts(payload.get("proxyTypeCount")),
    )
