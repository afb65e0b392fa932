# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
current.py — Fetch current conditions from Open-Meteo.

Separate from the range pipeline: NASA POWER data lags by a few hours, so
"right now" comes from the Open-Meteo forecast API's `current` block.

API docs: https://open-meteo.com/en/docs
"""

import requests

from weather_or_not.models import Coordinate
from weather_or_not.utils import with_retry

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
]

# WMO weather interpretation codes, grouped the way Open-Meteo documents them
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: int) -> str:
    return WEATHER_CODES.get(code, f"Unknown ({code})")


def fetch_current(coordinate: Coordinate, imperial: bool = False) -> dict:
    """Fetch current conditions for a location.

    Args:
        coordinate: Location to query.
        imperial: Report °F, mph and inches instead of °C, km/h and mm.

    Returns:
        Dict with keys time, temperature, humidity, precipitation,
        weather_code, description, wind_speed and units (a dict of unit
        labels for temperature, precipitation and wind_speed).

    Raises:
        RuntimeError: If all retry attempts fail or the response is malformed.
    """
    params = {
        "latitude": coordinate.latitude,
        "longitude": coordinate.longitude,
        "current": ",".join(CURRENT_VARIABLES),
        "timezone": "auto",
    }
    if imperial:
        params.update({
            "temperature_unit": "fahrenheit",
            "wind_speed_unit": "mph",
            "precipitation_unit": "inch",
        })

    def _call():
        r = requests.get(OPEN_METEO_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label="Open-Meteo current conditions API")
    return _parse_current(data, imperial)


def _parse_current(data: dict, imperial: bool = False) -> dict:
    try:
        current = data["current"]
        code = int(current["weather_code"])
        return {
            "time": current.get("time"),
            "temperature": current["temperature_2m"],
            "humidity": current["relative_humidity_2m"],
            "precipitation": current["precipitation"] or 0,
            "weather_code": code,
            "description": describe_weather_code(code),
            "wind_speed": current["wind_speed_10m"],
            "units": {
                "temperature": "°F" if imperial else "°C",
                "precipitation": "in" if imperial else "mm",
                "wind_speed": "mph" if imperial else "km/h",
            },
        }
    except (KeyError, TypeError, ValueError) as e:
        raise RuntimeError(f"Unexpected API response structure: {e}") from e
