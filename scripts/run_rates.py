# scripts/run_rates.py
"""
Runner: per-100k 7/14-day window rates for one region, printed as a table.

Run:
  python scripts/run_rates.py --region "New York" --max 300 --start-date 2021-11-01 --chart
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import requests

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from case_rates.pipeline import run
from case_rates.rates.errors import CaseRatesError
from case_rates.rates.populations import regions
from case_rates.report.charting import plot_rates
from case_rates.report.table import render_table
from case_rates.utils.config import ASSETS_DIR, CASES_FEED_URL, MAX_DISPLAY_VALUE


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--region", help="Region name, exact feed spelling.")
    parser.add_argument("--population", type=int, default=None,
                        help="Population override (skips the registry).")
    parser.add_argument("--max", dest="max_display_value", type=float, default=MAX_DISPLAY_VALUE,
                        help="7-day rate that fills the bar (env MAX_DISPLAY_VALUE).")
    parser.add_argument("--start-date", type=date.fromisoformat, default=None,
                        help="First day shown in the table and chart (YYYY-MM-DD).")
    parser.add_argument("--chart", action="store_true", help=f"Save a PNG under {ASSETS_DIR}.")
    parser.add_argument("--feed-url", default=CASES_FEED_URL)
    parser.add_argument("--list-regions", action="store_true", help="Print known regions and exit.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if not args.list_regions:
        if not args.region:
            parser.error("--region is required")
        if args.max_display_value is None:
            parser.error("--max is required (or set MAX_DISPLAY_VALUE)")
    return args


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_regions:
        print("\n".join(regions()))
        return 0

    try:
        frame = run(
            args.region,
            args.max_display_value,
            population=args.population,
            feed_url=args.feed_url,
        )
    except (CaseRatesError, requests.RequestException) as exc:
        print(f"[rates] error: {exc}", file=sys.stderr)
        return 2

    print(render_table(frame, start_date=args.start_date))

    if args.chart and not frame.empty:
        slug = args.region.lower().replace(" ", "_")
        png = plot_rates(
            frame,
            ASSETS_DIR / f"rates_{slug}.png",
            region=args.region,
            start_date=args.start_date,
            max_display_value=args.max_display_value,
        )
        print(f"[rates] chart saved: {png}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
