"""Unit tests for the ingress/egress traffic pie builder."""

from __future__ import annotations

import pytest

from dashboard.charting.builder import build_traffic_chart_spec
from dashboard.charting.formatters import format_bytes
from dashboard.charting.proxy_types import EGRESS_TRAFFIC_COLOR, INGRESS_TRAFFIC_COLOR
from dashboard.charting.styles import PLAIN_PIE_STYLE, RICH_PIE_STYLE

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("ingress", "egress"),
    [(0, 0), (1024, 0), (0, 1), (5, 7), (10**12, 3 * 10**9)],
)
def test_traffic_chart_always_has_ingress_then_egress(ingress: int, egress: int) -> None:
    """Both directions are present in fixed order, zero values included."""

    spec = build_traffic_chart_spec(ingress, egress, "#333")

    assert [s.name for s in spec.slices] == ["ingress traffic", "egress traffic"]
    assert [s.value for s in spec.slices] == [ingress, egress]
    assert spec.legend_labels == ("ingress traffic", "egress traffic")
    assert spec.total == ingress + egress


def test_traffic_chart_scenario_single_kilobyte_ingress() -> None:
    """1 KB of ingress and nothing out renders 100% / 0%."""

    spec = build_traffic_chart_spec(1024, 0, "#333")
    ingress, egress = spec.slices

    assert format_bytes(1024) == "1.0 KB"
    assert spec.tooltip_format(ingress) == "ingress traffic: 1.0 KB — 100%"
    assert spec.tooltip_format(egress) == "egress traffic: 0 bytes — 0%"
    assert spec.label_format(ingress) == "ingress traffic\n1.0 KB"


def test_traffic_chart_zero_total_reports_zero_percent() -> None:
    """An idle server yields two zero slices at 0% without dividing by zero."""

    spec = build_traffic_chart_spec(0, 0, "#333")

    assert [s.value for s in spec.slices] == [0, 0]
    for item in spec.slices:
        assert spec.tooltip_format(item).endswith(" — 0%")


def test_traffic_chart_uses_fixed_colors() -> None:
    """Ingress and egress keep distinct colors regardless of values."""

    first = build_traffic_chart_spec(1, 2, "#333")
    second = build_traffic_chart_spec(900, 0, "#fff")

    assert [s.color for s in first.slices] == [INGRESS_TRAFFIC_COLOR, EGRESS_TRAFFIC_COLOR]
    assert [s.color for s in second.slices] == [INGRESS_TRAFFIC_COLOR, EGRESS_TRAFFIC_COLOR]
    assert INGRESS_TRAFFIC_COLOR != EGRESS_TRAFFIC_COLOR


def test_traffic_chart_text_color_only_affects_typography() -> None:
    """Changing the theme color leaves slices and formatters untouched."""

    light = build_traffic_chart_spec(300, 100, "#333")
    dark = build_traffic_chart_spec(300, 100, "rgba(255, 255, 255, 0.82)")

    assert light.slices == dark.slices
    assert light.tooltip_format == dark.tooltip_format
    assert light.text_color == "#333"
    assert dark.text_color == "rgba(255, 255, 255, 0.82)"


def test_traffic_chart_clamps_negative_and_malformed_counters() -> None:
    """Negative or non-numeric counters are drawn as zero instead of failing."""

    spec = build_traffic_chart_spec(-50, "garbage", "#333")  # type: ignore[arg-type]

    assert [s.value for s in spec.slices] == [0, 0]


def test_traffic_chart_is_idempotent() -> None:
    """Identical inputs produce equal specs."""

    assert build_traffic_chart_spec(10, 20, "#333") == build_traffic_chart_spec(10, 20, "#333")


def test_traffic_chart_percentages_round_to_whole_numbers() -> None:
    """Percentages are rounded to whole numbers of the combined total."""

    spec = build_traffic_chart_spec(1, 2, "#333", byte_formatter=lambda n: f"{n}B")
    ingress, egress = spec.slices

    assert spec.tooltip_format(ingress) == "ingress traffic: 1B — 33%"
    assert spec.tooltip_format(egress) == "egress traffic: 2B — 67%"


def test_traffic_chart_accepts_style_preset() -> None:
    """The style preset is carried on the ChartSpec without changing the data."""

    rich = build_traffic_chart_spec(4, 4, "#333")
    plain = build_traffic_chart_spec(4, 4, "#333", style=PLAIN_PIE_STYLE)

    assert rich.style is RICH_PIE_STYLE
    assert plain.style is PLAIN_PIE_STYLE
    assert rich.slices == plain.slices
