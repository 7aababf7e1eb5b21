"""Data-only pie chart specifications.

A ChartSpec describes what to draw (slices, legend, formatters) without any
knowledge of the rendering engine; `render.to_echarts_option` adapts it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .styles import PieStyle


@dataclass(frozen=True, slots=True)
class ChartSlice:
    """A single pie wedge.

    Args:
        name: Display name (also used as the legend entry).
        value: Non-negative wedge value.
        color: Fixed color for this category.
    """

    name: str
    value: int
    color: str


SliceFormatter = Callable[[ChartSlice], str]


@dataclass(frozen=True, slots=True)
class ChartSpec:
    """Declarative pie chart specification.

    Args:
        title: Chart title.
        slices: Wedges in render order.
        legend_labels: Legend entries in render order.
        tooltip_format: Renders the hover tooltip for a slice.
        label_format: Renders the on-chart label for a slice.
        text_color: Text color used for title, legend and labels.
        style: Pie presentation preset.
    """

    title: str
    slices: tuple[ChartSlice, ...]
    legend_labels: tuple[str, ...]
    tooltip_format: SliceFormatter
    label_format: SliceFormatter
    text_color: str
    style: PieStyle

    @property
    def total(self) -> int:
        """Return the sum of all slice values."""

        return sum(s.value for s in self.slices)

    @property
    def is_empty(self) -> bool:
        """Return True when there is nothing to draw."""

        return not self.slices
