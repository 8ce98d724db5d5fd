from datetime import date

from case_rates.rates.windows import compute_window_rates, to_frame
from case_rates.report.charting import plot_rates
from case_rates.report.table import render_table


def test_render_table_lists_all_rows(long_series):
    frame = to_frame(compute_window_rates(long_series, 1_000_000, 50))
    text = render_table(frame)
    lines = text.splitlines()
    assert len(lines) == 1 + len(long_series)
    assert "window7_running_max" in lines[0]


def test_render_table_start_date(long_series):
    frame = to_frame(compute_window_rates(long_series, 1_000_000, 50))
    text = render_table(frame, start_date=date(2021, 1, 21))
    assert len(text.splitlines()) == 1 + 10
    assert "2021-01-20" not in text


def test_render_table_empty():
    assert render_table(to_frame([])) == "(no rows)"


def test_plot_rates_writes_png(tmp_path, long_series):
    frame = to_frame(compute_window_rates(long_series, 1_000_000, 50))
    out = plot_rates(
        frame,
        tmp_path / "assets" / "rates.png",
        region="Ohio",
        start_date=date(2021, 1, 10),
        max_display_value=50,
    )
    assert out.endswith("rates.png")
    assert (tmp_path / "assets" / "rates.png").stat().st_size > 0
