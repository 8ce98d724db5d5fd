from __future__ import annotations

import os
from datetime import date, timedelta

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from case_rates.rates.schemas import DailyRecord


def make_series(cumulative, start=date(2021, 1, 1)):
    return [
        DailyRecord(date=start + timedelta(days=i), cumulative_cases=c)
        for i, c in enumerate(cumulative)
    ]


@pytest.fixture
def eight_days():
    """Eight days of cumulative counts for a population of one million."""
    return make_series([100, 150, 200, 250, 300, 350, 400, 500])


@pytest.fixture
def long_series():
    """Thirty days with a bump in the middle (cumulative, non-decreasing)."""
    daily = [10] * 10 + [60] * 10 + [5] * 10
    total, cumulative = 0, []
    for d in daily:
        total += d
        cumulative.append(total)
    return make_series(cumulative)
