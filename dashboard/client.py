"""HTTP client for the frps dashboard API."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from django.conf import settings

from serverstats.server_info import ServerInfo, parse_server_info

logger = logging.getLogger(__name__)

SERVER_INFO_PATH = "/api/serverinfo"


class ServerInfoUnavailable(RuntimeError):
    """Raised when frps server info cannot be fetched or decoded."""


@dataclass(frozen=True, slots=True)
class ServerInfoClient:
    """Fetch server info from a running frps dashboard.

    Args:
        base_url: frps dashboard root URL (e.g. `http://127.0.0.1:7500`).
        username: Optional dashboard user for HTTP basic auth.
        password: Optional dashboard password for HTTP basic auth.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (used by tests).
    """

    base_url: str
    username: str = ""
    password: str = ""
    timeout: float = 5.0
    transport: httpx.BaseTransport | None = None

    @classmethod
    def from_settings(cls) -> ServerInfoClient:
        """Build a client from the `FRPS_DASHBOARD_*` Django settings."""

        return cls(
            base_url=settings.FRPS_DASHBOARD_URL,
            username=settings.FRPS_DASHBOARD_USER,
            password=settings.FRPS_DASHBOARD_PASSWORD,
            timeout=float(settings.FRPS_DASHBOARD_TIMEOUT),
        )

    def fetch(self) -> ServerInfo:
        """Return the current server info snapshot.

        Raises:
            ServerInfoUnavailable: On transport errors, non-2xx responses, or
                a body that is not a JSON object.
        """

        auth = httpx.BasicAuth(self.username, self.password) if self.username else None
        url = self.base_url.rstrip("/") + SERVER_INFO_PATH
        logger.info("Fetching frps server info from %s", url)
        try:
            with httpx.Client(timeout=self.timeout, auth=auth, transport=self.transport) as client:
                response = client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning("frps server info request failed: %s", exc)
            raise ServerInfoUnavailable(f"Could not reach frps dashboard at {url}: {exc}") from exc
        except ValueError as exc:
            logger.warning("frps server info response is not JSON: %s", exc)
            raise ServerInfoUnavailable(f"frps dashboard at {url} returned invalid JSON.") from exc

        if not isinstance(payload, dict):
            raise ServerInfoUnavailable(f"frps dashboard at {url} returned {type(payload).__name__}, expected an object.")
        logger.info("frps server info: HTTP %d", response.status_code)
        return parse_server_info(payload)
