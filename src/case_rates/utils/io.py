from __future__ import annotations

import io
import logging
from typing import List

import pandas as pd
import requests

from case_rates.rates.errors import FeedFormatError
from case_rates.rates.schemas import DailyRecord
from case_rates.utils.config import (
    CASES_FEED_URL,
    FEED_CASES_COLUMN,
    FEED_DATE_COLUMN,
    FEED_REGION_COLUMN,
    FEED_TIMEOUT,
)

log = logging.getLogger(__name__)


def fetch_feed(url: str = CASES_FEED_URL, timeout: float = FEED_TIMEOUT) -> pd.DataFrame:
    """Download the cumulative cases CSV and parse it into a DataFrame.

    Args:
        url: Absolute URL of the CSV feed (one row per region and day).
        timeout: HTTP timeout in seconds.

    Returns:
        The raw feed as a DataFrame, columns as published.

    Raises:
        requests.HTTPError: If the HTTP call fails.
    """
    log.info("fetching cases feed url=%s", url)
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    df = pd.read_csv(io.StringIO(resp.text))
    log.info("feed rows=%d columns=%s", len(df), list(df.columns))
    return df


def region_series(
    df: pd.DataFrame,
    region: str,
    *,
    region_col: str = FEED_REGION_COLUMN,
    date_col: str = FEED_DATE_COLUMN,
    cases_col: str = FEED_CASES_COLUMN,
) -> List[DailyRecord]:
    """Filter the feed to one region and return its rows ordered by date.

    The region match is exact, the same rule the population registry uses.
    A region absent from the feed yields an empty list.

    Raises:
        FeedFormatError: If any of the three required columns is missing, or a
            cases cell for the region is blank or non-numeric.
    """
    missing = [c for c in (region_col, date_col, cases_col) if c not in df.columns]
    if missing:
        raise FeedFormatError(f"Cases feed is missing column(s): {', '.join(missing)}")

    sub = df.loc[df[region_col] == region, [date_col, cases_col]].copy()
    sub[date_col] = pd.to_datetime(sub[date_col]).dt.date
    sub = sub.sort_values(date_col, kind="stable")
    log.info("region=%r rows=%d", region, len(sub))

    records: List[DailyRecord] = []
    for d, c in zip(sub[date_col], sub[cases_col]):
        try:
            cases = int(c)
        except (TypeError, ValueError, OverflowError):
            raise FeedFormatError(
                f"Cases feed has a non-numeric {cases_col!r} value {c!r} for region={region!r} on {d}"
            ) from None
        records.append(DailyRecord(date=d, cumulative_cases=cases))
    return records
