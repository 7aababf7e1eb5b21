"""Slice label and tooltip formatters.

Formatters are frozen dataclasses rather than closures so that two specs built
from the same inputs compare equal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.template.defaultfilters import filesizeformat

from .schema import ChartSlice

ByteFormatter = Callable[[int], str]


def format_bytes(value: int) -> str:
    """Return a human-readable size string (e.g. `1.0 KB`).

    Django separates the number and unit with a non-breaking space; chart
    labels use a plain one.
    """

    return str(filesizeformat(value)).replace("\xa0", " ")


def slice_percent(value: int, total: int) -> int:
    """Return `value` as a rounded percentage of `total`.

    Halves round up, as the browser does. The denominator is floored at 1 so
    an all-zero chart reports 0%.
    """

    percent = Decimal(100 * value) / Decimal(max(1, total))
    return int(percent.quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class ByteLabelFormatter:
    """Render `<name>\\n<size>`."""

    byte_formatter: ByteFormatter = format_bytes

    def __call__(self, item: ChartSlice) -> str:
        return f"{item.name}\n{self.byte_formatter(item.value)}"


@dataclass(frozen=True, slots=True)
class ByteTooltipFormatter:
    """Render `<name>: <size> — <percent>%` against a fixed total."""

    total: int
    byte_formatter: ByteFormatter = format_bytes

    def __call__(self, item: ChartSlice) -> str:
        percent = slice_percent(item.value, self.total)
        return f"{item.name}: {self.byte_formatter(item.value)} — {percent}%"


@dataclass(frozen=True, slots=True)
class CountLabelFormatter:
    """Render `<name>: <count>`."""

    def __call__(self, item: ChartSlice) -> str:
        return f"{item.name}: {item.value}"


@dataclass(frozen=True, slots=True)
class CountTooltipFormatter:
    """Render `<name>: <count> (<percent>%)` against a fixed total."""

    total: int

    def __call__(self, item: ChartSlice) -> str:
        return f"{item.name}: {item.value} ({slice_percent(item.value, self.total)}%)"
