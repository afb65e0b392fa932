# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for utils.py — formatting, retry logic and the log file."""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from weather_or_not import utils
from weather_or_not.utils import (
    configure_log,
    fmt_day,
    fmt_hour,
    log_event,
    read_last_run,
    with_retry,
    write_last_run,
)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def test_fmt_day_accepts_date_and_string():
    assert fmt_day(date(2026, 2, 23)) == "Mon 23 Feb"
    assert fmt_day("2026-02-23") == "Mon 23 Feb"


def test_fmt_hour_zero_pads():
    assert fmt_hour(7) == "07:00"
    assert fmt_hour(23) == "23:00"


# ---------------------------------------------------------------------------
# log_event / configure_log
# ---------------------------------------------------------------------------

def test_log_event_appends_timestamped_line(_tmp_log_path):
    log_event("WARN", "first")
    log_event("INFO", "second\nline")

    lines = _tmp_log_path.read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("[WARN] first")
    assert lines[1].endswith("[INFO] second line")


def test_configure_log_redirects_output(tmp_path, monkeypatch):
    monkeypatch.setattr("weather_or_not.utils.LOG_PATH", utils.LOG_PATH)
    target = tmp_path / "other" / "run.log"

    configure_log(target)
    log_event("INFO", "hello")

    assert "hello" in target.read_text()


def test_log_event_never_raises_on_unwritable_path(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    log_event("ERROR", "x", log_path=blocker / "nested" / "log.txt")


# ---------------------------------------------------------------------------
# with_retry
# ---------------------------------------------------------------------------

def test_retry_succeeds_on_first_attempt():
    fn = MagicMock(return_value=42)
    assert with_retry(fn, label="test") == 42
    assert fn.call_count == 1


def test_retry_succeeds_on_second_attempt():
    fn = MagicMock(side_effect=[RuntimeError("fail"), 99])
    with patch("weather_or_not.utils.time.sleep"):
        assert with_retry(fn, label="test") == 99
    assert fn.call_count == 2


def test_retry_exhausts_all_attempts_and_logs(_tmp_log_path):
    fn = MagicMock(side_effect=RuntimeError("always fails"))
    with patch("weather_or_not.utils.time.sleep") as mock_sleep:
        with pytest.raises(RuntimeError, match="All 3 attempts failed"):
            with_retry(fn, label="test")
    assert fn.call_count == 3
    assert mock_sleep.call_count == 2
    assert "always fails" in _tmp_log_path.read_text()


# ---------------------------------------------------------------------------
# write_last_run / read_last_run
# ---------------------------------------------------------------------------

def test_write_and_read_last_run(tmp_path):
    write_last_run("OK", "7/7 day(s), 3 predicted", log_dir=tmp_path)
    result = read_last_run(log_dir=tmp_path)
    assert result["status"] == "OK"
    assert result["detail"] == "7/7 day(s), 3 predicted"


def test_read_last_run_missing_file(tmp_path):
    assert read_last_run(log_dir=tmp_path / "nonexistent") is None


def test_read_last_run_returns_most_recent(tmp_path):
    write_last_run("OK", "fine", log_dir=tmp_path)
    write_last_run("ERROR", "No data available", log_dir=tmp_path)
    result = read_last_run(log_dir=tmp_path)
    assert result["status"] == "ERROR"
    assert result["detail"] == "No data available"
