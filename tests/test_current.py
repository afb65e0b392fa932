# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_current.py — Unit tests for current.py.

All tests use in-memory fake API payloads — no network calls.
"""

from unittest.mock import MagicMock, patch

import pytest

from weather_or_not.current import describe_weather_code, fetch_current
from weather_or_not.models import Coordinate

COORD = Coordinate(37.0, -122.0)


def _make_current_payload(**overrides) -> dict:
    current = {
        "time": "2024-06-10T14:00",
        "temperature_2m": 18.4,
        "relative_humidity_2m": 71,
        "precipitation": 0.0,
        "weather_code": 2,
        "wind_speed_10m": 12.3,
    }
    current.update(overrides)
    return {"latitude": 37.0, "longitude": -122.0, "current": current}


def test_fetch_current_maps_fields(monkeypatch):
    monkeypatch.setattr("weather_or_not.current.with_retry", lambda fn, **kw: _make_current_payload())

    result = fetch_current(COORD)

    assert result["temperature"] == 18.4
    assert result["humidity"] == 71
    assert result["wind_speed"] == 12.3
    assert result["description"] == "Partly cloudy"
    assert result["units"]["temperature"] == "°C"


def test_fetch_current_null_precipitation_defaults_to_zero(monkeypatch):
    monkeypatch.setattr(
        "weather_or_not.current.with_retry",
        lambda fn, **kw: _make_current_payload(precipitation=None),
    )
    assert fetch_current(COORD)["precipitation"] == 0


def test_fetch_current_imperial_units_requested():
    resp = MagicMock()
    resp.json.return_value = _make_current_payload()
    with patch("weather_or_not.current.requests.get", return_value=resp) as mock_get:
        result = fetch_current(COORD, imperial=True)

    params = mock_get.call_args.kwargs["params"]
    assert params["temperature_unit"] == "fahrenheit"
    assert params["wind_speed_unit"] == "mph"
    assert params["precipitation_unit"] == "inch"
    assert result["units"] == {"temperature": "°F", "precipitation": "in", "wind_speed": "mph"}


def test_fetch_current_raises_on_bad_response(monkeypatch):
    monkeypatch.setattr("weather_or_not.current.with_retry", lambda fn, **kw: {})
    with pytest.raises(RuntimeError, match="Unexpected API response structure"):
        fetch_current(COORD)


def test_describe_unknown_weather_code():
    assert describe_weather_code(42) == "Unknown (42)"
