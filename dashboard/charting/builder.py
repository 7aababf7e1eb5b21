"""Build pie chart specifications from frps server statistics.

Both builders are pure: they read only their arguments and the static palette,
and return a new immutable ChartSpec on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from django.utils.translation import gettext

from serverstats.server_info import coerce_count, parse_proxy_type_counts

from .formatters import (
    ByteFormatter,
    ByteLabelFormatter,
    ByteTooltipFormatter,
    CountLabelFormatter,
    CountTooltipFormatter,
    format_bytes,
)
from .proxy_types import (
    CANONICAL_PROXY_TYPES,
    EGRESS_TRAFFIC_COLOR,
    INGRESS_TRAFFIC_COLOR,
    proxy_type_color,
)
from .schema import ChartSlice, ChartSpec, SliceFormatter
from .styles import RICH_PIE_STYLE, PieStyle

logger = logging.getLogger(__name__)


def build_traffic_chart_spec(
    ingress_bytes: int,
    egress_bytes: int,
    text_color: str,
    *,
    style: PieStyle = RICH_PIE_STYLE,
    byte_formatter: ByteFormatter = format_bytes,
) -> ChartSpec:
    """Build the two-slice ingress/egress traffic pie.

    Args:
        ingress_bytes: Total bytes received by proxies.
        egress_bytes: Total bytes sent by proxies.
        text_color: Theme text color for title, legend and labels.
        style: Pie presentation preset.
        byte_formatter: Humanizes byte counts for labels and tooltips.

    Returns:
        ChartSpec with exactly two slices (ingress, then egress). Zero values
        are kept so an idle direction is still visible.
    """

    ingress = _clamped(ingress_bytes, field="ingress_bytes")
    egress = _clamped(egress_bytes, field="egress_bytes")
    slices = (
        ChartSlice(name=gettext("ingress traffic"), value=ingress, color=INGRESS_TRAFFIC_COLOR),
        ChartSlice(name=gettext("egress traffic"), value=egress, color=EGRESS_TRAFFIC_COLOR),
    )
    return _build_pie_spec(
        title=gettext("Traffic"),
        slices=slices,
        text_color=text_color,
        style=style,
        label_format=ByteLabelFormatter(byte_formatter=byte_formatter),
        tooltip_format=ByteTooltipFormatter(total=ingress + egress, byte_formatter=byte_formatter),
    )


def build_proxy_type_chart_spec(
    counts: Mapping[str, int],
    text_color: str,
    *,
    style: PieStyle = RICH_PIE_STYLE,
) -> ChartSpec:
    """Build the per-protocol proxy count pie.

    Args:
        counts: Proxy count keyed by protocol name; missing protocols count as 0.
        text_color: Theme text color for title, legend and labels.
        style: Pie presentation preset.

    Returns:
        ChartSpec with one slice per protocol whose count is above zero, in
        canonical protocol order. All-zero input yields an empty spec.
    """

    normalized = parse_proxy_type_counts(counts)
    unknown = sorted(set(normalized) - {p.value for p in CANONICAL_PROXY_TYPES})
    if unknown:
        logger.debug("Ignoring unknown proxy types in chart input: %s", ", ".join(unknown))

    slices = tuple(
        ChartSlice(name=proxy_type.value, value=normalized[proxy_type.value], color=proxy_type_color(proxy_type))
        for proxy_type in CANONICAL_PROXY_TYPES
        if normalized.get(proxy_type.value, 0) > 0
    )
    return _build_pie_spec(
        title=gettext("Proxy Types"),
        slices=slices,
        text_color=text_color,
        style=style,
        label_format=CountLabelFormatter(),
        tooltip_format=CountTooltipFormatter(total=sum(s.value for s in slices)),
    )


def _build_pie_spec(
    *,
    title: str,
    slices: tuple[ChartSlice, ...],
    text_color: str,
    style: PieStyle,
    label_format: SliceFormatter,
    tooltip_format: SliceFormatter,
) -> ChartSpec:
    """Assemble a ChartSpec whose legend mirrors the slice order."""

    return ChartSpec(
        title=title,
        slices=slices,
        legend_labels=tuple(s.name for s in slices),
        tooltip_format=tooltip_format,
        label_format=label_format,
        text_color=text_color,
        style=style,
    )


def _clamped(value: object, *, field: str) -> int:
    """Return `value` as a non-negative int, logging when it had to be clamped."""

    count = coerce_count(value)
    if count != value:
        logger.debug("Clamped %s=%r to %d", field, value, count)
    return count
