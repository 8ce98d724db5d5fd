from datetime import date
from io import StringIO

import pandas as pd
import pytest
import requests

from case_rates.rates.errors import FeedFormatError
from case_rates.utils import io as feed_io

FEED_CSV = """date,state,fips,cases,deaths
2021-01-02,Ohio,39,120,3
2021-01-01,Ohio,39,100,2
2021-01-01,Texas,48,900,10
2021-01-03,Ohio,39,150,4
"""


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_feed_parses_csv(monkeypatch):
    calls = {}

    def fake_get(url, timeout):
        calls["url"], calls["timeout"] = url, timeout
        return _FakeResponse(FEED_CSV)

    monkeypatch.setattr(feed_io.requests, "get", fake_get)
    df = feed_io.fetch_feed("https://example.org/cases.csv", timeout=5)
    assert calls == {"url": "https://example.org/cases.csv", "timeout": 5}
    assert len(df) == 4
    assert {"date", "state", "cases"} <= set(df.columns)


def test_fetch_feed_http_error(monkeypatch):
    monkeypatch.setattr(feed_io.requests, "get", lambda url, timeout: _FakeResponse("", 503))
    with pytest.raises(requests.HTTPError):
        feed_io.fetch_feed("https://example.org/cases.csv")


def test_region_series_filters_and_sorts():
    df = pd.read_csv(StringIO(FEED_CSV))
    rows = feed_io.region_series(df, "Ohio")
    assert [r.date for r in rows] == [date(2021, 1, 1), date(2021, 1, 2), date(2021, 1, 3)]
    assert [r.cumulative_cases for r in rows] == [100, 120, 150]


def test_region_series_unknown_region_is_empty():
    df = pd.read_csv(StringIO(FEED_CSV))
    assert feed_io.region_series(df, "ohio") == []


def test_region_series_missing_column():
    df = pd.DataFrame({"date": ["2021-01-01"], "state": ["Ohio"]})
    with pytest.raises(FeedFormatError, match="cases"):
        feed_io.region_series(df, "Ohio")


def test_region_series_custom_columns():
    df = pd.DataFrame(
        {"day": ["2021-03-02", "2021-03-01"], "county": ["Kent", "Kent"], "total": [7, 4]}
    )
    rows = feed_io.region_series(df, "Kent", region_col="county", date_col="day", cases_col="total")
    assert [r.cumulative_cases for r in rows] == [4, 7]


@pytest.mark.parametrize("bad", [None, "n/a"])
def test_region_series_bad_cases_cell(bad):
    df = pd.DataFrame(
        {"date": ["2021-01-01", "2021-01-02"], "state": ["Ohio", "Ohio"], "cases": [10, bad]}
    )
    with pytest.raises(FeedFormatError, match="2021-01-02"):
        feed_io.region_series(df, "Ohio")
