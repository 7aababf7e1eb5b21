"""Views for the frps traffic and proxy type dashboard."""

from __future__ import annotations

import json
import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from dashboard.charting.builder import build_proxy_type_chart_spec, build_traffic_chart_spec
from dashboard.charting.render import to_echarts_option
from dashboard.charting.styles import DEFAULT_PIE_STYLE_KEY, PieStyle, get_pie_style
from dashboard.client import ServerInfoClient, ServerInfoUnavailable
from dashboard.theme import resolve_text_color
from serverstats.server_info import ServerInfo

logger = logging.getLogger(__name__)


def _server_info_client() -> ServerInfoClient:
    """Return the client used to reach frps (patched in tests)."""

    return ServerInfoClient.from_settings()


def _configured_style() -> PieStyle:
    """Return the FRPS_DASHBOARD_CHART_STYLE preset, or the default when it is unknown."""

    try:
        return get_pie_style(settings.FRPS_DASHBOARD_CHART_STYLE)
    except KeyError as exc:
        logger.warning("Invalid FRPS_DASHBOARD_CHART_STYLE, using %r: %s", DEFAULT_PIE_STYLE_KEY, exc.args[0])
        return get_pie_style(DEFAULT_PIE_STYLE_KEY)


def _request_style(request: HttpRequest) -> PieStyle:
    """Return the pie style for a request.

    Raises:
        KeyError: When `?style=` names an unknown preset.
    """

    requested = request.GET.get("style")
    if requested:
        return get_pie_style(requested)
    return _configured_style()


def _chart_options(info: ServerInfo, *, text_color: str, style: PieStyle) -> dict[str, Any]:
    """Build both dashboard charts for a server info snapshot."""

    traffic = info.traffic()
    return {
        "traffic": to_echarts_option(
            build_traffic_chart_spec(traffic.ingress_bytes, traffic.egress_bytes, text_color, style=style)
        ),
        "proxyTypes": to_echarts_option(
            build_proxy_type_chart_spec(info.proxy_type_counts(), text_color, style=style)
        ),
    }


@require_GET
def healthz(request: HttpRequest) -> HttpResponse:
    """Return an empty 200 response for liveness probes."""

    return HttpResponse(status=200)


@require_GET
def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the server overview with traffic and proxy type charts.

    When frps cannot be reached the page still renders, with an error banner
    and empty-state charts.
    """

    text_color = resolve_text_color(request)
    try:
        style = _request_style(request)
    except KeyError as exc:
        logger.info("Falling back to the configured chart style: %s", exc.args[0])
        style = _configured_style()

    error: str | None = None
    try:
        info = _server_info_client().fetch()
    except ServerInfoUnavailable as exc:
        error = str(exc)
        info = ServerInfo()

    charts = _chart_options(info, text_color=text_color, style=style)
    context = {
        "server_info": info,
        "server_error": error,
        "chart_style": style.key,
        "charts": charts,
        "charts_json": json.dumps(charts),
    }
    return render(request, "dashboard/index.html", context)


@require_GET
def server_info_api(request: HttpRequest) -> JsonResponse:
    """Return the normalized frps server info as JSON."""

    try:
        info = _server_info_client().fetch()
    except ServerInfoUnavailable as exc:
        return JsonResponse({"ok": False, "error": str(exc)}, status=502)
    return JsonResponse(info.as_json())


@require_GET
def charts_api(request: HttpRequest) -> JsonResponse:
    """Return ECharts options for the traffic and proxy type charts."""

    try:
        style = _request_style(request)
    except KeyError as exc:
        return JsonResponse({"ok": False, "error": exc.args[0]}, status=400)

    try:
        info = _server_info_client().fetch()
    except ServerInfoUnavailable as exc:
        return JsonResponse({"ok": False, "error": str(exc)}, status=502)

    return JsonResponse(_chart_options(info, text_color=resolve_text_color(request), style=style))
