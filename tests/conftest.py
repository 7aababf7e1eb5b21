"""Pytest fixtures shared across the dashboard test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import httpx
import pytest

from dashboard.client import ServerInfoClient


@pytest.fixture
def server_info_payload() -> dict[str, Any]:
    """Return a representative frps `/api/serverinfo` JSON body."""

    return {
        "version": "0.61.0",
        "bindPort": 7000,
        "vhostHTTPPort": 80,
        "vhostHTTPSPort": 443,
        "tcpmuxHTTPConnectPort": 1337,
        "kcpBindPort": 7000,
        "quicBindPort": 7002,
        "subdomainHost": "frps.example.com",
        "maxPoolCount": 5,
        "maxPortsPerClient": 0,
        "heartbeatTimeout": 90,
        "allowPortsStr": "2000-3000",
        "totalTrafficIn": 2048,
        "totalTrafficOut": 1024,
        "curConns": 3,
        "clientCounts": 2,
        "proxyTypeCount": {"tcp": 4, "udp": 0, "https": 1},
    }


@pytest.fixture
def mock_frps_client() -> Callable[..., ServerInfoClient]:
    """Return a factory for ServerInfoClient instances backed by httpx.MockTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> ServerInfoClient:
        return ServerInfoClient(
            base_url=kwargs.pop("base_url", "http://frps.test:7500"),
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return factory


@pytest.fixture
def frps_online(monkeypatch: pytest.MonkeyPatch, mock_frps_client, server_info_payload) -> dict[str, Any]:
    """Route dashboard views to a fake frps that serves `server_info_payload`."""

    client = mock_frps_client(lambda request: httpx.Response(200, json=server_info_payload))
    monkeypatch.setattr("dashboard.views._server_info_client", lambda: client)
    return server_info_payload


@pytest.fixture
def frps_offline(monkeypatch: pytest.MonkeyPatch, mock_frps_client) -> None:
    """Route dashboard views to a fake frps that refuses connections."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = mock_frps_client(refuse)
    monkeypatch.setattr("dashboard.views._server_info_client", lambda: client)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request cycle or IO.
    - `integration`: tests touching Django views, templates, or HTTP.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
