"""Fixed-width text table for derived rows."""
from __future__ import annotations

from datetime import date
from typing import Optional

import pandas as pd


def render_table(frame: pd.DataFrame, *, start_date: Optional[date] = None) -> str:
    """Render the derived frame as text; rows before `start_date` are hidden."""
    if start_date is not None and not frame.empty:
        frame = frame[frame["date"] >= start_date]
    if frame.empty:
        return "(no rows)"
    return frame.to_string(
        index=False,
        float_format=lambda v: f"{v:,.1f}",
    )
