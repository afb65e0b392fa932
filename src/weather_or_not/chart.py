# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — ASCII table and bar chart rendering for range results.

Uses only the Python standard library (os).
All rendering functions return strings ready to print.
"""

import os

from weather_or_not.models import DailyRecord, RangeResult
from weather_or_not.utils import fmt_day, fmt_hour

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar


def _source_label(is_prediction: bool) -> str:
    return "predicted" if is_prediction else "observed"


def render_range_table(result: RangeResult, location_line: str) -> str:
    """Render a range result as a fixed-width ASCII table.

    Requested days without data are listed underneath the table.

    Args:
        result: Range result from fetch_range.
        location_line: Display name for the location header.

    Returns:
        Multi-line string containing the formatted table.
    """
    header_label = f"📍 {location_line} — {result.requested_days}-day range"
    sep = "─" * 52
    header_row = "  ".join(["Day       ", " Avg°C", " Precip mm", " Hours", " Source"])

    lines = [header_label, sep, header_row, sep]
    for day in result:
        lines.append("  ".join([
            f"{fmt_day(day.date):<10}",
            f"{day.avg_temperature_c:>5.1f}°",
            f"{day.total_precipitation_mm:>10.1f}",
            f"{len(day.hours):>6}",
            f" {_source_label(day.is_prediction)}",
        ]))
    lines.append(sep)

    missing = result.missing_dates
    if missing:
        lines.append("No data: " + ", ".join(fmt_day(d) for d in missing))
    return "\n".join(lines)


def render_hourly_table(record: DailyRecord) -> str:
    """Render the hourly samples of one day as a fixed-width ASCII table."""
    header_label = f"{fmt_day(record.date)} — {_source_label(record.is_prediction)}"
    sep = "─" * 30
    lines = [header_label, sep, "Time    Temp°C   Precip mm", sep]
    for h in record.hours:
        lines.append(f"{fmt_hour(h.hour):<7} {h.temperature_c:>6.1f}° {h.precipitation_mm:>10.2f}")
    lines.append(sep)
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────
# Bar chart helpers
# ─────────────────────────────────────────────────────────────

def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def _terminal_bar_width() -> int:
    try:
        terminal_width = os.get_terminal_size().columns
    except OSError:
        terminal_width = FALLBACK_TERMINAL_WIDTH
    return max(10, terminal_width - BAR_LABEL_RESERVE)


def render_temperature_chart(result: RangeResult, bar_width: int | None = None) -> str:
    """Render average daily temperature as a horizontal bar chart.

    Values are shifted so the coldest day maps to an empty bar when any
    day is below zero; labels always show the real temperature. Predicted
    days are marked with '*'.
    """
    if bar_width is None:
        bar_width = _terminal_bar_width()

    labels = [fmt_day(d.date) + ("*" if d.is_prediction else " ") for d in result]
    temps = [d.avg_temperature_c for d in result]

    lowest = min(temps)
    offset = -lowest if lowest < 0 else 0
    shifted = [t + offset for t in temps]
    max_shifted = max(shifted) or 1

    label_w = max(len(lbl) for lbl in labels)
    lines = ["Average temperature (°C)"]
    for label, value, real in zip(labels, shifted, temps):
        lines.append(f"  {label:<{label_w}} │{_bar(value, max_shifted, bar_width)}│ {real:>5.1f}°C")
    if any(d.is_prediction for d in result):
        lines.append("  * predicted from past years")
    return "\n".join(lines)
