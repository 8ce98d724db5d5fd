# src/case_rates/rates/schemas.py
"""
Typed data models for the rolling-window transform.

These Pydantic schemas define the contract between:
- the feed adapter (rows already filtered to one region, ordered by date),
- the window transform,
- and the table/chart sinks.
"""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Region(BaseModel):
    """
    A registry entry.

    Attributes:
        name: Region name exactly as spelled by the cases feed.
        population: Resident population used as the per-100k denominator.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Region name (feed spelling).")
    population: int = Field(..., gt=0, description="Resident population.")


class DailyRecord(BaseModel):
    """
    One day of the cumulative case series for a single region.

    Attributes:
        date: Calendar day of the observation.
        cumulative_cases: Confirmed cases reported from the start through `date`.
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Calendar day (ISO-8601).")
    cumulative_cases: int = Field(..., ge=0, description="Running total of confirmed cases.")


class DerivedRecord(BaseModel):
    """
    A DailyRecord plus the window indicators computed for it.

    Attributes:
        date: Calendar day, copied from the input row.
        cumulative_cases: Cumulative count, copied from the input row.
        window14_rate: New cases over the trailing 14 days per 100k.
        window7_rate: New cases over the trailing 7 days per 100k.
        window7_running_max: Largest window7_rate seen up to and including this row.
        bar_units: Filled units of the bar, in [0, BAR_WIDTH].
        bar: Fixed-width glyph bar scaled against the display ceiling.
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    cumulative_cases: int
    window14_rate: float = Field(..., description="14-day new cases per 100k.")
    window7_rate: float = Field(..., description="7-day new cases per 100k.")
    window7_running_max: float = Field(..., description="Running max of window7_rate.")
    bar_units: int = Field(..., ge=0, description="Filled bar units.")
    bar: str = Field(..., description="Glyph bar for window7_rate.")
