# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
aggregate.py — Resolve a span of days concurrently into a RangeResult.

This is the entry point of the pipeline. Every day is resolved on its own
worker; days that come back empty are dropped, the rest are sorted by date.
Only a range with no data at all is an error.
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from datetime import date, timedelta

from weather_or_not.models import Coordinate, DailyRecord, RangeResult
from weather_or_not.resolver import DEFAULT_HISTORY_YEARS, resolve_day

DEFAULT_DAYS = 7
# Upper bound on days resolved at once; each future day adds its own year workers
MAX_DAY_WORKERS = 32

NO_DATA_MESSAGE = (
    "No data available for the selected location and date range. "
    "Please try different parameters."
)


class NoDataError(RuntimeError):
    """Raised when every day of a range came back without data."""

    def __init__(self, message: str = NO_DATA_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class RangeProgress:
    """Status event passed to the on_progress callback of fetch_range."""

    in_progress: bool
    completed: int
    total: int


def fetch_range(
    coordinate: Coordinate,
    start_date: date,
    days: int = DEFAULT_DAYS,
    today: date | None = None,
    history_years: int = DEFAULT_HISTORY_YEARS,
    on_progress: Callable[[RangeProgress], None] | None = None,
) -> RangeResult:
    """Fetch observed or predicted weather for days consecutive dates.

    Args:
        coordinate: Location to query.
        start_date: First calendar date of the range.
        days: Number of consecutive dates, starting at start_date.
        today: Reference calendar day. Defaults to date.today().
        history_years: How many past years feed each predicted day.
        on_progress: Optional callback. Receives an in_progress event before
            the fetch starts, one per resolved day, and a final event with
            in_progress False. Called from the caller's thread.

    Returns:
        RangeResult holding the days that produced data, ascending by date.

    Raises:
        ValueError: If days is less than 1.
        NoDataError: If no day in the range produced any data.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    if today is None:
        today = date.today()

    def _report(in_progress: bool, completed: int) -> None:
        if on_progress is not None:
            on_progress(RangeProgress(in_progress=in_progress, completed=completed, total=days))

    _report(True, 0)

    fetched: list[DailyRecord] = []
    with ThreadPoolExecutor(max_workers=min(days, MAX_DAY_WORKERS)) as pool:
        futures = [
            pool.submit(
                resolve_day,
                coordinate,
                start_date + timedelta(days=offset),
                today,
                history_years,
            )
            for offset in range(days)
        ]
        for completed, future in enumerate(as_completed(futures), start=1):
            record = future.result()
            if record is not None:
                fetched.append(record)
            _report(True, completed)

    _report(False, days)

    if not fetched:
        raise NoDataError()

    return RangeResult(
        coordinate=coordinate,
        start_date=start_date,
        requested_days=days,
        days=tuple(sorted(fetched, key=lambda d: d.date)),
    )
