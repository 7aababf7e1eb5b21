"""Pie styling presets.

Both dashboard charts are produced by one pie builder; what differs between
the bordered donut look and the plain pie look is captured here as data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

LegendOrient = Literal["horizontal", "vertical"]


@dataclass(frozen=True, slots=True)
class PieStyle:
    """Presentation settings for a pie chart series.

    Args:
        key: Stable preset name.
        radius: Inner and outer radius (ECharts percentage strings).
        border_radius: Wedge corner radius in pixels.
        border_color: Wedge border color, or None for no border.
        border_width: Wedge border width in pixels.
        avoid_label_overlap: Whether the engine should shift overlapping labels.
        show_labels: Whether slice labels are drawn next to wedges.
        emphasis_font_size: Label font size on hover, or None to disable emphasis.
        legend_orient: Legend layout direction.
        legend_bottom: Legend offset from the chart bottom.
    """

    key: str
    radius: tuple[str, str]
    border_radius: int = 0
    border_color: str | None = None
    border_width: int = 0
    avoid_label_overlap: bool = True
    show_labels: bool = True
    emphasis_font_size: int | None = None
    legend_orient: LegendOrient = "horizontal"
    legend_bottom: str = "5%"


RICH_PIE_STYLE: Final[PieStyle] = PieStyle(
    key="rich",
    radius=("40%", "70%"),
    border_radius=10,
    border_color="var(--n-color)",
    border_width=2,
    emphasis_font_size=20,
)

PLAIN_PIE_STYLE: Final[PieStyle] = PieStyle(
    key="plain",
    radius=("0%", "70%"),
)

PIE_STYLES: Final[dict[str, PieStyle]] = {style.key: style for style in (RICH_PIE_STYLE, PLAIN_PIE_STYLE)}

DEFAULT_PIE_STYLE_KEY: Final[str] = RICH_PIE_STYLE.key


def get_pie_style(key: str) -> PieStyle:
    """Return the PieStyle preset registered under `key`.

    Raises:
        KeyError: When no preset uses that name.
    """

    try:
        return PIE_STYLES[key.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(PIE_STYLES))
        raise KeyError(f"Unknown chart style {key!r}; expected one of: {known}.") from None
