# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
power.py — Fetch one day of hourly data from the NASA POWER point API.

NASA POWER is free and requires no API key. Each request covers a single
calendar day (start == end) and returns hourly 2 m temperature (T2M, °C)
and corrected precipitation (PRECTOTCORR, mm) keyed by 'YYYYMMDDHH'.
Missing values are reported as -999.

API docs: https://power.larc.nasa.gov/docs/services/api/temporal/hourly/
"""

from datetime import date

import requests

from weather_or_not.models import Coordinate, HourlyPayload, HourlySample
from weather_or_not.utils import log_event

POWER_HOURLY_URL = "https://power.larc.nasa.gov/api/temporal/hourly/point"

TEMPERATURE_PARAM = "T2M"
PRECIPITATION_PARAM = "PRECTOTCORR"

SENTINEL = -999


class PayloadSchemaError(ValueError):
    """The provider answered, but not in the shape we decode."""


def date_key(day: date) -> str:
    """Return the provider's date key, e.g. '20240229'."""
    return day.strftime("%Y%m%d")


def hour_key(day: date, hour: int) -> str:
    """Return the composite hourly key, e.g. '2024022907'."""
    return f"{date_key(day)}{hour:02d}"


def fetch_point(coordinate: Coordinate, day: date) -> HourlyPayload | None:
    """Fetch hourly temperature and precipitation for one location and day.

    Makes exactly one request. Any failure is logged and reported as None so
    a single bad day or year never aborts the surrounding fetch.

    Args:
        coordinate: Location to query.
        day: Local calendar date to query.

    Returns:
        The decoded hourly payload, or None on any failure.
    """
    key = date_key(day)
    params = {
        "parameters": f"{TEMPERATURE_PARAM},{PRECIPITATION_PARAM}",
        "community": "RE",
        "longitude": coordinate.longitude,
        "latitude": coordinate.latitude,
        "start": key,
        "end": key,
        "format": "JSON",
    }

    try:
        r = requests.get(POWER_HOURLY_URL, params=params)
        r.raise_for_status()
        return parse_payload(r.json())
    except (requests.RequestException, ValueError) as e:
        # requests' JSONDecodeError and PayloadSchemaError are both ValueErrors
        log_event(
            "WARN",
            f"NASA POWER request failed for {key} at "
            f"({coordinate.latitude}, {coordinate.longitude}): {e}",
        )
        return None


def parse_payload(data: dict) -> HourlyPayload:
    """Decode the POWER response body into an HourlyPayload.

    Expected shape::

        {"properties": {"parameter": {
            "T2M":         {"2024010100": 4.1, ...},
            "PRECTOTCORR": {"2024010100": 0.0, ...}
        }}}

    Either parameter may be absent, which decodes to an empty mapping.

    Raises:
        PayloadSchemaError: If the containers are missing or not objects, or
            a value is not a number.
    """
    try:
        parameter = data["properties"]["parameter"]
    except (KeyError, TypeError):
        raise PayloadSchemaError("Unexpected API response structure: no properties.parameter")
    if not isinstance(parameter, dict):
        raise PayloadSchemaError("Unexpected API response structure: parameter is not an object")

    return HourlyPayload(
        temperature=_numeric_series(parameter, TEMPERATURE_PARAM),
        precipitation=_numeric_series(parameter, PRECIPITATION_PARAM),
    )


def _numeric_series(parameter: dict, name: str) -> dict[str, float]:
    series = parameter.get(name)
    if series is None:
        return {}
    if not isinstance(series, dict):
        raise PayloadSchemaError(f"Unexpected API response structure: {name} is not an object")

    values = {}
    for key, value in series.items():
        # bool is an int subclass; the provider never sends one
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PayloadSchemaError(f"Non-numeric {name} value for {key}: {value!r}")
        try:
            values[key] = float(value)
        except OverflowError:
            raise PayloadSchemaError(f"{name} value for {key} is out of float range")
    return values


def hourly_value(payload: HourlyPayload, day: date, hour: int) -> tuple[float, float] | None:
    """Return (temperature, precipitation) for one hour, or None.

    None when either field is missing or equal to the -999 sentinel.
    """
    key = hour_key(day, hour)
    temp = payload.temperature.get(key)
    precip = payload.precipitation.get(key)
    if temp is None or precip is None:
        return None
    if temp == SENTINEL or precip == SENTINEL:
        return None
    return temp, precip


def extract_hourly(payload: HourlyPayload, day: date) -> list[HourlySample]:
    """Extract the valid observed hours for a day, ascending by hour.

    Hours with missing or sentinel data are left out. No interpolation.
    """
    samples = []
    for hour in range(24):
        value = hourly_value(payload, day, hour)
        if value is None:
            continue
        temp, precip = value
        samples.append(HourlySample(hour=hour, temperature_c=temp, precipitation_mm=precip))
    return samples
