"""Integration tests for the frps server info HTTP client."""

from __future__ import annotations

import base64

import httpx
import pytest
from django.test import override_settings

from dashboard.client import ServerInfoClient, ServerInfoUnavailable

pytestmark = pytest.mark.integration


def test_fetch_parses_server_info(mock_frps_client, server_info_payload) -> None:
    """A 200 JSON response is parsed into a ServerInfo snapshot."""

    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=server_info_payload)

    info = mock_frps_client(handler, base_url="http://frps.test:7500/").fetch()

    assert str(seen[0].url) == "http://frps.test:7500/api/serverinfo"
    assert "authorization" not in seen[0].headers
    assert info.total_traffic_in == 2048
    assert info.proxy_type_counts()["tcp"] == 4


def test_fetch_sends_basic_auth(mock_frps_client, server_info_payload) -> None:
    """Dashboard credentials are sent with HTTP basic auth."""

    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=server_info_payload)

    mock_frps_client(handler, username="admin", password="secret").fetch()

    expected = "Basic " + base64.b64encode(b"admin:secret").decode("ascii")
    assert seen[0].headers["authorization"] == expected


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, text="unauthorized"),
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=[1, 2, 3]),
    ],
)
def test_fetch_raises_server_info_unavailable(mock_frps_client, response: httpx.Response) -> None:
    """HTTP errors and unexpected bodies surface as ServerInfoUnavailable."""

    client = mock_frps_client(lambda request: response)

    with pytest.raises(ServerInfoUnavailable):
        client.fetch()


def test_fetch_wraps_transport_errors(mock_frps_client) -> None:
    """Connection failures surface as ServerInfoUnavailable."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ServerInfoUnavailable, match="Could not reach frps dashboard"):
        mock_frps_client(refuse).fetch()


@override_settings(
    FRPS_DASHBOARD_URL="http://frps.internal:7500",
    FRPS_DASHBOARD_USER="ops",
    FRPS_DASHBOARD_PASSWORD="pw",
    FRPS_DASHBOARD_TIMEOUT=2.5,
)
def test_client_from_settings() -> None:
    """from_settings reads the FRPS_DASHBOARD_* settings."""

    client = ServerInfoClient.from_settings()

    assert client.base_url == "http://frps.internal:7500"
    assert client.username == "ops"
    assert client.password == "pw"
    assert client.timeout == 2.5
