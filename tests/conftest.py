# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Shared fixtures: keep log writes out of the working directory."""

import pytest


@pytest.fixture(autouse=True)
def _tmp_log_path(tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "weather_or_not.log"
    monkeypatch.setattr("weather_or_not.utils.LOG_PATH", log_path)
    return log_path
