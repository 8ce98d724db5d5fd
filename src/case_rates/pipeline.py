# src/case_rates/pipeline.py
"""
End-to-end run for one region: population -> feed -> window transform -> frame.

Design goals:
- The transform stays pure; all I/O lives here and in utils.io
- Records can be injected so the run works without the network (tests, replays)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pandas as pd

from case_rates.rates.populations import lookup
from case_rates.rates.schemas import DailyRecord
from case_rates.rates.windows import compute_window_rates, to_frame
from case_rates.utils.config import CASES_FEED_URL, FEED_TIMEOUT
from case_rates.utils.io import fetch_feed, region_series

log = logging.getLogger(__name__)


def resolve_population(region: str, population: Optional[int] = None) -> int:
    """
    Population for `region`, or the override when one is given.

    The override bypasses the registry, so a region missing from the registry
    still works when the caller supplies its own denominator.

    Raises:
        RegionNotFound: No override and the region is not in the registry.
    """
    if population is not None:
        log.info("region=%r population override=%d", region, population)
        return population
    return lookup(region)


def run(
    region: str,
    max_display_value: float,
    *,
    population: Optional[int] = None,
    records: Optional[Sequence[DailyRecord]] = None,
    feed_url: str = CASES_FEED_URL,
    timeout: float = FEED_TIMEOUT,
) -> pd.DataFrame:
    """
    Compute the derived frame for `region`.

    Parameters
    ----------
    region : str
        Region name, exact feed spelling.
    max_display_value : float
        Rate that fills the whole bar.
    population : Optional[int]
        Denominator override; skips the registry lookup.
    records : Optional[Sequence[DailyRecord]]
        Pre-filtered, date-ordered series; skips the feed download.
    feed_url, timeout
        Feed location and HTTP timeout when `records` is not given.

    Returns
    -------
    pd.DataFrame
        One row per input day, columns as in `rates.windows.FRAME_COLUMNS`.
    """
    pop = resolve_population(region, population)

    if records is None:
        records = region_series(fetch_feed(feed_url, timeout=timeout), region)
    if not records:
        log.warning("no rows for region=%r", region)

    derived = compute_window_rates(records, pop, max_display_value)
    if derived:
        last = derived[-1]
        log.info(
            "region=%r rows=%d last=%s window7=%.1f window14=%.1f max7=%.1f",
            region, len(derived), last.date.isoformat(),
            last.window7_rate, last.window14_rate, last.window7_running_max,
        )
    return to_frame(derived)
