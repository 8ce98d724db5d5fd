"""
Rolling-window transform: cumulative cases -> per-100k window rates.

Rows are indexed 1-based below to match the window boundary rules:

- window7_rate:  0 for rows 1-7, the scaled cumulative total at row 8,
  the scaled 7-day difference from row 9 on.
- window14_rate: 0 for rows 1-14, the scaled cumulative total at row 15,
  the scaled 14-day difference from row 16 on.

The first full window uses the cumulative total, not a difference.
"""
from __future__ import annotations

import math
import numbers
from typing import Iterable, List, Sequence

import pandas as pd

from case_rates.utils.config import (
    BAR_EMPTY,
    BAR_FILLED,
    BAR_WIDTH,
    PER_CAPITA,
    WINDOW_LONG,
    WINDOW_SHORT,
)

from .errors import InvalidParameter
from .schemas import DailyRecord, DerivedRecord

FRAME_COLUMNS = [
    "date",
    "cumulative_cases",
    "window14_rate",
    "window7_rate",
    "window7_running_max",
    "bar_units",
    "bar",
]


def _check_positive(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidParameter(f"{name} is too large, got {value!r}") from None
    if not as_float > 0:
        raise InvalidParameter(f"{name} must be positive, got {value!r}")
    return as_float


def window_rate(cumulative: Sequence[int], row: int, span: int, scale: float) -> float:
    """
    Rate for 1-based `row` over a trailing window of `span` days.

    Rows up to `span` have no full window and yield 0.0; row `span + 1` is the
    scaled cumulative value; later rows are the scaled difference.
    """
    if row <= span:
        return 0.0
    if row == span + 1:
        return cumulative[row - 1] * scale
    return (cumulative[row - 1] - cumulative[row - 1 - span]) * scale


def bar_units(rate: float, max_display_value: float, width: int = BAR_WIDTH) -> int:
    """Filled units for `rate`, rounded half up and clamped to [0, width]."""
    ceiling = _check_positive("max_display_value", max_display_value)
    # clamp before rounding; a tiny ceiling scales to inf
    scaled = min(max(rate / ceiling * width, 0.0), float(width))
    return math.floor(scaled + 0.5)


def render_bar(rate: float, max_display_value: float, width: int = BAR_WIDTH) -> str:
    """Fixed-width bar: filled glyphs followed by empty glyphs, always `width` long."""
    filled = bar_units(rate, max_display_value, width)
    return BAR_FILLED * filled + BAR_EMPTY * (width - filled)


def compute_window_rates(
    series: Iterable[DailyRecord],
    population: int,
    max_display_value: float,
) -> List[DerivedRecord]:
    """
    Derive window rates, running max and bar for every row of `series`.

    Args:
        series: DailyRecords for one region, ascending by date. Not re-sorted.
        population: Per-100k denominator. Must be > 0.
        max_display_value: Rate that fills the whole bar. Must be > 0.

    Returns:
        One DerivedRecord per input row, same order. Empty in, empty out.

    Raises:
        InvalidParameter: If population or max_display_value is not positive.
    """
    _check_positive("population", population)
    max_display_value = _check_positive("max_display_value", max_display_value)

    rows = list(series)
    cumulative = [r.cumulative_cases for r in rows]
    scale = PER_CAPITA / population

    out: List[DerivedRecord] = []
    running_max = 0.0
    for i, rec in enumerate(rows, start=1):
        rate7 = window_rate(cumulative, i, WINDOW_SHORT, scale)
        rate14 = window_rate(cumulative, i, WINDOW_LONG, scale)
        running_max = rate7 if i == 1 else max(running_max, rate7)
        units = bar_units(rate7, max_display_value)
        out.append(
            DerivedRecord(
                date=rec.date,
                cumulative_cases=rec.cumulative_cases,
                window14_rate=rate14,
                window7_rate=rate7,
                window7_running_max=running_max,
                bar_units=units,
                bar=render_bar(rate7, max_display_value),
            )
        )
    return out


def to_frame(records: Sequence[DerivedRecord]) -> pd.DataFrame:
    """Tidy DataFrame of derived rows (the column set handed to the sinks)."""
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame([r.model_dump() for r in records], columns=FRAME_COLUMNS)
