from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd


def plot_rates(
    frame: pd.DataFrame,
    path: str | Path,
    *,
    region: str = "",
    start_date: Optional[date] = None,
    max_display_value: Optional[float] = None,
) -> str:
    """
    Plot window7/window14 rates and the 7-day running max on a date axis.
    `start_date` only trims the x axis. Returns the saved PNG path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    xs = list(frame["date"])

    plt.figure(figsize=(10, 5))
    plt.plot(xs, frame["window7_rate"], label="7-day rate")
    plt.plot(xs, frame["window14_rate"], label="14-day rate")
    plt.plot(xs, frame["window7_running_max"], linestyle="--", label="7-day running max")
    if max_display_value:
        plt.axhline(max_display_value, color="grey", linewidth=0.8, label="display ceiling")
    if start_date is not None and xs:
        plt.xlim(left=start_date, right=max(xs[-1], start_date))
    plt.title(f"New cases per 100k {region}".strip())
    plt.xlabel("date"); plt.ylabel("cases per 100k")
    plt.xticks(rotation=45)
    plt.legend()
    plt.tight_layout()
    plt.savefig(path, dpi=120)
    plt.close()
    return str(path)
