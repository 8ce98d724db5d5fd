"""
Global configuration for Case Rates.

Centralizes paths, feed column names, and tunable parameters. Values can be
overridden via environment variables or a project-root .env file.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: .../case-rates
PROJECT_ROOT = Path(__file__).resolve().parents[3]
# does not override variables already exported
load_dotenv(dotenv_path=PROJECT_ROOT / ".env", override=False, encoding="utf-8")


# Feed (cumulative cases per region and day)
CASES_FEED_URL = os.getenv(
    "CASES_FEED_URL",
    "https://raw.githubusercontent.com/nytimes/covid-19-data/master/us-states.csv",
)
FEED_REGION_COLUMN = os.getenv("FEED_REGION_COLUMN", "state")
FEED_DATE_COLUMN = os.getenv("FEED_DATE_COLUMN", "date")
FEED_CASES_COLUMN = os.getenv("FEED_CASES_COLUMN", "cases")
FEED_TIMEOUT = float(os.getenv("FEED_TIMEOUT", "30"))

# Output
ASSETS_DIR = Path(os.getenv("ASSETS_DIR", PROJECT_ROOT / "reports" / "assets"))

# Display ceiling for the bar column, raw string; parsed by the CLI
MAX_DISPLAY_VALUE = os.getenv("MAX_DISPLAY_VALUE", "").strip() or None

# Transform constants
PER_CAPITA = 100_000
WINDOW_SHORT = 7
WINDOW_LONG = 14
BAR_WIDTH = 40
BAR_FILLED = "█"
BAR_EMPTY = "░"
