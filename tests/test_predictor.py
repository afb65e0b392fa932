# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for predictor.py — plain historical averaging."""

import random

import pytest

from weather_or_not.models import HistoricalSample
from weather_or_not.predictor import predict


def _sample(year: int, temp: float, precip: float) -> HistoricalSample:
    return HistoricalSample(year=year, temperature_c=temp, precipitation_mm=precip)


def test_predict_empty_returns_none():
    assert predict([]) is None


def test_predict_single_sample_is_identity():
    result = predict([_sample(2020, 14.2, 1.3)])
    assert result.temperature_c == pytest.approx(14.2)
    assert result.precipitation_mm == pytest.approx(1.3)


def test_predict_averages_temperature_and_precipitation():
    samples = [_sample(2019, 10.0, 0.0), _sample(2020, 20.0, 2.0), _sample(2021, 30.0, 4.0)]
    result = predict(samples)
    assert result.temperature_c == pytest.approx(20.0)
    assert result.precipitation_mm == pytest.approx(2.0)


def test_predict_floors_negative_precipitation_at_zero():
    samples = [_sample(2019, 5.0, -0.4), _sample(2020, 6.0, -0.2)]
    assert predict(samples).precipitation_mm == 0.0


def test_predict_never_clamps_temperature():
    samples = [_sample(2019, -30.0, 0.0), _sample(2020, -20.0, 0.0)]
    assert predict(samples).temperature_c == pytest.approx(-25.0)


def test_predict_precipitation_never_negative_for_random_inputs():
    rng = random.Random(1234)
    for _ in range(200):
        n = rng.randint(1, 5)
        samples = [
            _sample(2000 + i, rng.uniform(-40, 40), rng.uniform(-10, 10))
            for i in range(n)
        ]
        assert predict(samples).precipitation_mm >= 0.0
