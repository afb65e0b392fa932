# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
geocode.py — Resolve a place name to a Place via Open-Meteo Geocoding API.

This is how the CLI turns `--location "Santa Cruz"` into the Coordinate the
range pipeline needs. Free, no API key required.

API docs: https://open-meteo.com/en/docs/geocoding-api
"""

import requests

from weather_or_not.models import Coordinate, Place
from weather_or_not.utils import with_retry

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

# Result fields joined, in order, into the display name
NAME_FIELDS = ("name", "admin1", "country")


class LocationNotFoundError(ValueError):
    """No geocoding result matched the place name."""


def geocode(place: str) -> Place:
    """Resolve a place name to its best-matching Place.

    Args:
        place: Human-readable place name, e.g. 'Santa Cruz' or 'London, UK'.

    Returns:
        Place with a 'City, Region, Country' name and its Coordinate.

    Raises:
        LocationNotFoundError: If the search has no match.
        RuntimeError: If all API retry attempts fail or a match has no
            coordinates.
    """
    params = {"name": place, "count": 1, "language": "en", "format": "json"}

    def _call():
        r = requests.get(GEOCODING_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label=f"Geocoding API for '{place}'")

    matches = data.get("results") or []
    if not matches:
        raise LocationNotFoundError(f'Location "{place}" not found. Try a more specific name.')
    return _parse_place(matches[0], fallback_name=place)


def _parse_place(match: dict, fallback_name: str) -> Place:
    try:
        coordinate = Coordinate(float(match["latitude"]), float(match["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise RuntimeError(f"Unexpected geocoding result for '{fallback_name}': {e}") from e

    parts = [match.get(field) for field in NAME_FIELDS]
    name = ", ".join(p for p in parts if p) or fallback_name
    return Place(name=name, coordinate=coordinate)
