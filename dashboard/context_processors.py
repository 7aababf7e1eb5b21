"""Template context processors for the frps dashboard."""

from __future__ import annotations

from django.http import HttpRequest

from dashboard.theme import THEME_COLORS, active_theme, resolve_text_color


def theme(request: HttpRequest) -> dict[str, str]:
    """Expose the active theme and its colors to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `theme`, `text_color`, `background_color` and
        `primary_color`.
    """

    name = active_theme(request)
    tokens = THEME_COLORS.get(name, THEME_COLORS["light"])
    return {
        "theme": name if name in THEME_COLORS else "light",
        "text_color": resolve_text_color(request),
        "background_color": tokens["background"],
        "primary_color": tokens["primary"],
    }
