"""Theme tokens and text color resolution for chart typography.

The active theme is chosen per request; builders only ever see the resolved
color string.
"""

from __future__ import annotations

from typing import Final

from django.conf import settings
from django.http import HttpRequest

DEFAULT_TEXT_COLOR: Final[str] = "#333"
THEME_COOKIE: Final[str] = "frps_theme"

THEME_COLORS: Final[dict[str, dict[str, str]]] = {
    "light": {
        "primary": "#2196F3",
        "background": "#ffffff",
        "text": DEFAULT_TEXT_COLOR,
    },
    "dark": {
        "primary": "#2196F3",
        "background": "#18181c",
        "text": "rgba(255, 255, 255, 0.82)",
    },
}


def active_theme(request: HttpRequest | None) -> str:
    """Return the theme name for a request.

    Lookup order: `?theme=` query parameter, the theme cookie, then the
    `FRPS_DASHBOARD_THEME` setting. Unknown names are returned as-is so the
    caller can decide on a fallback.
    """

    if request is not None:
        for raw in (request.GET.get("theme"), request.COOKIES.get(THEME_COOKIE)):
            if raw:
                return raw.strip().lower()
    return str(getattr(settings, "FRPS_DASHBOARD_THEME", "light")).strip().lower()


def resolve_text_color(request: HttpRequest | None = None) -> str:
    """Return the text color of the active theme.

    Args:
        request: Current request, or None outside a request cycle.

    Returns:
        CSS color string; DEFAULT_TEXT_COLOR when the theme is unknown.
    """

    tokens = THEME_COLORS.get(active_theme(request))
    if not tokens:
        return DEFAULT_TEXT_COLOR
    return tokens.get("text") or DEFAULT_TEXT_COLOR
