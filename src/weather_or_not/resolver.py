# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
resolver.py — Build the DailyRecord for a single date.

Dates up to and including today use the observed hourly data for that day.
Later dates are predicted: the same calendar day is fetched for each of the
previous history_years years (concurrently) and each hour is averaged
across whichever years returned valid data.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from weather_or_not.models import (
    Coordinate,
    DailyRecord,
    HistoricalSample,
    HourlyPayload,
    HourlySample,
)
from weather_or_not.power import extract_hourly, fetch_point, hourly_value
from weather_or_not.predictor import predict

DEFAULT_HISTORY_YEARS = 5


def is_future(target: date, today: date | None = None) -> bool:
    """True if target falls after today's calendar day."""
    if today is None:
        today = date.today()
    return target > today


def resolve_day(
    coordinate: Coordinate,
    target: date,
    today: date | None = None,
    history_years: int = DEFAULT_HISTORY_YEARS,
) -> DailyRecord | None:
    """Resolve one date to an observed or predicted DailyRecord.

    Args:
        coordinate: Location to query.
        target: Calendar date to resolve.
        today: Reference calendar day. Defaults to date.today().
        history_years: How many past years feed a prediction.

    Returns:
        The day's record, or None if no valid hour could be produced.
    """
    if today is None:
        today = date.today()
    if is_future(target, today):
        return resolve_predicted_day(coordinate, target, today, history_years)
    return resolve_actual_day(coordinate, target)


def resolve_actual_day(coordinate: Coordinate, target: date) -> DailyRecord | None:
    payload = fetch_point(coordinate, target)
    if payload is None:
        return None
    hours = extract_hourly(payload, target)
    if not hours:
        return None
    return DailyRecord.from_hours(target, hours, is_prediction=False)


def historical_dates(target: date, today: date, history_years: int) -> dict[int, date]:
    """Map each past year to the same month/day as target.

    Years are today.year - 1 back to today.year - history_years. A year where
    the date does not exist (29 February outside a leap year) is left out.
    """
    dates = {}
    for offset in range(1, history_years + 1):
        year = today.year - offset
        try:
            dates[year] = target.replace(year=year)
        except ValueError:
            continue
    return dates


def resolve_predicted_day(
    coordinate: Coordinate,
    target: date,
    today: date,
    history_years: int = DEFAULT_HISTORY_YEARS,
) -> DailyRecord | None:
    """Predict target from the same calendar day in previous years.

    All historical fetches run concurrently and are joined before any
    averaging starts. A year whose fetch fails simply contributes nothing.
    """
    dates = historical_dates(target, today, history_years)
    if not dates:
        return None

    responses: dict[int, HourlyPayload] = {}
    lock = threading.Lock()

    def _fetch_year(year: int, day: date) -> None:
        payload = fetch_point(coordinate, day)
        if payload is not None:
            with lock:
                responses[year] = payload

    with ThreadPoolExecutor(max_workers=len(dates)) as pool:
        futures = [pool.submit(_fetch_year, year, day) for year, day in dates.items()]
    # Leaving the with-block waits for every fetch; result() re-raises bugs.
    for future in futures:
        future.result()

    predictions: list[HourlySample] = []
    for hour in range(24):
        samples = []
        for year, day in dates.items():
            payload = responses.get(year)
            if payload is None:
                continue
            value = hourly_value(payload, day, hour)
            if value is None:
                continue
            temp, precip = value
            samples.append(HistoricalSample(year=year, temperature_c=temp, precipitation_mm=precip))

        prediction = predict(samples)
        if prediction is not None:
            predictions.append(HourlySample(
                hour=hour,
                temperature_c=prediction.temperature_c,
                precipitation_mm=prediction.precipitation_mm,
                is_prediction=True,
            ))

    if not predictions:
        return None
    return DailyRecord.from_hours(target, predictions, is_prediction=True)
