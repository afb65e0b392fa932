# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: formatting, retry logic and the log file.
"""

import time
from collections import deque
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import Any


def fmt_day(day: date | str) -> str:
    """Format a date as a short human-readable label.

    Args:
        day: A datetime.date or a 'YYYY-MM-DD' string.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    if isinstance(day, str):
        day = datetime.strptime(day, "%Y-%m-%d").date()
    return day.strftime("%a %d %b")


def fmt_hour(hour: int) -> str:
    """Format an hour of the day (0-23) as 'HH:00'."""
    return f"{hour:02d}:00"


DEFAULT_LOG_PATH = Path("logs/weather_or_not.log")
# Where log_event writes. configure_log() points this at [log].path.
LOG_PATH = DEFAULT_LOG_PATH

MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 5


def configure_log(path: Path) -> None:
    """Send subsequent log_event lines to path."""
    global LOG_PATH
    LOG_PATH = Path(path)


def log_event(level: str, message: str, log_path: Path | None = None) -> None:
    """Append a timestamped line to the log file.

    Format: ``2026-02-23 20:00:01 [WARN] message``

    Args:
        level: 'INFO', 'WARN' or 'ERROR'.
        message: Text to record. Newlines are flattened.
        log_path: Destination file. Defaults to LOG_PATH.
    """
    path = log_path if log_path is not None else LOG_PATH
    line = " ".join(message.splitlines())
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(path, "a") as f:
            f.write(f"{timestamp} [{level}] {line}\n")
    except OSError:
        pass  # Never crash on logging failure


def with_retry(
    fn: Callable[..., Any],
    *args: Any,
    label: str = "API call",
    **kwargs: Any,
) -> Any:
    """Call a function up to MAX_ATTEMPTS times, retrying on any exception.

    Used by geocoding and current conditions only. The range pipeline makes
    a single attempt per request.

    Args:
        fn: Callable to invoke.
        *args: Positional arguments forwarded to fn.
        label: Human-readable name for the call, used in warning messages.
        **kwargs: Keyword arguments forwarded to fn.

    Returns:
        The return value of fn on success.

    Raises:
        RuntimeError: If all MAX_ATTEMPTS attempts raise exceptions.
    """
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if attempt < MAX_ATTEMPTS:
                print(
                    f"[weather] {label} failed (attempt {attempt}/{MAX_ATTEMPTS}): "
                    f"{e}. Retrying in {RETRY_DELAY_SECONDS}s..."
                )
                time.sleep(RETRY_DELAY_SECONDS)
            else:
                msg = f"All {MAX_ATTEMPTS} attempts failed for {label}. Check your internet connection."
                print(f"[weather] {msg}")
                log_event("ERROR", f"{label} failed after {MAX_ATTEMPTS} attempts: {e}")
                raise RuntimeError(msg) from e


def write_last_run(
    status: str,
    detail: str,
    log_dir: Path = Path("logs"),
) -> None:
    """Append a status record to logs/last_run.txt after each run.

    Format: ``2026-02-23 20:00:01|OK|7 day(s), 2 predicted``

    Args:
        status: 'OK' or 'ERROR'.
        detail: Human-readable summary of the run outcome.
        log_dir: Directory containing last_run.txt.
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_dir / "last_run.txt", "a") as f:
            f.write(f"{timestamp}|{status}|{detail}\n")
    except OSError:
        pass


def read_last_run(log_dir: Path = Path("logs")) -> dict | None:
    """Read the most recent run record from logs/last_run.txt.

    Args:
        log_dir: Directory containing last_run.txt.

    Returns:
        Dict with keys timestamp, status, detail, or None if the file is
        missing, empty or malformed.
    """
    path = log_dir / "last_run.txt"
    if not path.exists():
        return None
    try:
        with open(path) as f:
            buf: deque[str] = deque(f, maxlen=1)
        if not buf:
            return None
        last = buf[0].rstrip("\n")
        parts = last.split("|", 2)
        if len(parts) != 3:
            return None
        return {"timestamp": parts[0], "status": parts[1], "detail": parts[2]}
    except OSError:
        return None
