"""Encode ChartSpec objects as ECharts pie options for the dashboard."""

from __future__ import annotations

from typing import Any, TypedDict

from .schema import ChartSpec


class EChartsPieItem(TypedDict):
    """One pie data item, carrying its pre-rendered label and tooltip."""

    name: str
    value: int
    itemStyle: dict[str, str]
    label: str
    tooltip: str


def to_echarts_option(spec: ChartSpec) -> dict[str, Any]:
    """Return a JSON-serializable ECharts option for a pie ChartSpec.

    Args:
        spec: ChartSpec produced by one of the builders.

    Returns:
        Dict with `title`, `tooltip`, `legend` and a single pie `series`.

    Notes:
        Formatter callables cannot be serialized, so every data item carries
        the strings they produce (`label`, `tooltip`); the browser glue wires
        them into ECharts formatter callbacks.
    """

    style = spec.style
    text_style = {"color": spec.text_color}
    data: list[EChartsPieItem] = [
        {
            "name": item.name,
            "value": item.value,
            "itemStyle": {"color": item.color},
            "label": spec.label_format(item),
            "tooltip": spec.tooltip_format(item),
        }
        for item in spec.slices
    ]

    item_style: dict[str, Any] = {}
    if style.border_radius:
        item_style["borderRadius"] = style.border_radius
    if style.border_color is not None:
        item_style["borderColor"] = style.border_color
        item_style["borderWidth"] = style.border_width

    series: dict[str, Any] = {
        "type": "pie",
        "radius": list(style.radius),
        "avoidLabelOverlap": style.avoid_label_overlap,
        "itemStyle": item_style,
        "label": {"show": style.show_labels, "color": spec.text_color},
        "data": data,
    }
    if style.emphasis_font_size is not None:
        series["emphasis"] = {
            "label": {
                "show": True,
                "fontSize": style.emphasis_font_size,
                "fontWeight": "bold",
                "color": spec.text_color,
            }
        }

    return {
        "title": {"text": spec.title, "left": "center", "top": 0, "textStyle": text_style},
        "tooltip": {"trigger": "item"},
        "legend": {
            "orient": style.legend_orient,
            "bottom": style.legend_bottom,
            "left": "center",
            "data": list(spec.legend_labels),
            "textStyle": text_style,
        },
        "series": [series],
    }
