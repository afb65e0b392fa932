# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
predictor.py — Predict one hour of a future day from past years.

The prediction is the plain mean of every past year that had data for
that hour. No trend fitting.
"""

from collections.abc import Sequence

from weather_or_not.models import HistoricalSample, Prediction


def predict(samples: Sequence[HistoricalSample]) -> Prediction | None:
    """Average historical samples for one hour.

    Args:
        samples: One sample per past year with valid data for the hour.

    Returns:
        Mean temperature and mean precipitation, or None if samples is
        empty. Precipitation is floored at 0; temperature is not clamped.
    """
    if not samples:
        return None
    n = len(samples)
    avg_temp = sum(s.temperature_c for s in samples) / n
    avg_precip = sum(s.precipitation_mm for s in samples) / n
    return Prediction(temperature_c=avg_temp, precipitation_mm=max(0.0, avg_precip))
