# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-or-not.

argparse (stdlib) is enough for three subcommands.

Commands:
  weather-or-not range     — observed or predicted weather for a date range
  weather-or-not current   — current conditions
  weather-or-not status    — last run info and log file size
"""

import argparse
import copy
from datetime import date, datetime, timedelta
from pathlib import Path

from weather_or_not.aggregate import RangeProgress, fetch_range
from weather_or_not.chart import render_hourly_table, render_range_table, render_temperature_chart
from weather_or_not.config import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config
from weather_or_not.current import fetch_current
from weather_or_not.geocode import LocationNotFoundError, geocode
from weather_or_not.models import Coordinate, Place
from weather_or_not.resolver import is_future
from weather_or_not.utils import configure_log, log_event, read_last_run, write_last_run


def _location_given(args) -> bool:
    return bool(getattr(args, "location", None)) or (
        getattr(args, "lat", None) is not None and getattr(args, "lon", None) is not None
    )


def _load_config(args) -> dict:
    """Load the config file, or fall back to defaults when a location was passed."""
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        if not _location_given(args):
            print(f"[error] {e}")
            raise SystemExit(1)
        config = copy.deepcopy(DEFAULT_CONFIG)
    except ValueError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    configure_log(Path(config["log"]["path"]))
    return config


def _resolve_location(args, config: dict) -> Place:
    if (args.lat is None) != (args.lon is None):
        print("[error] --lat and --lon must be given together.")
        raise SystemExit(1)

    if args.location:
        try:
            return geocode(args.location)
        except LocationNotFoundError as e:
            print(f"[error] {e}")
            raise SystemExit(1)

    if args.lat is not None:
        return Place(name=f"{args.lat:.4f}, {args.lon:.4f}", coordinate=Coordinate(args.lat, args.lon))

    location = config["location"]
    return Place(
        name=location["name"],
        coordinate=Coordinate(location["latitude"], location["longitude"]),
    )


def range_kind(start: date, last: date, today: date | None = None) -> str:
    """Describe which data sources a range from start to last will use."""
    if is_future(start, today):
        return "predicted"
    if is_future(last, today):
        return "observed + predicted"
    return "observed"


def _parse_start(raw: str | None) -> date:
    if raw is None:
        return date.today()
    try:
        return datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError:
        print(f"[error] Unrecognised --start date: '{raw}'. Use 'YYYY-MM-DD'.")
        raise SystemExit(1)


def _print_progress(progress: RangeProgress) -> None:
    if progress.in_progress:
        print(f"\r[weather] {progress.completed}/{progress.total} days resolved", end="", flush=True)
    else:
        print()


def cmd_range(args) -> None:
    """Fetch a date range, print the table and optional hourly/chart views."""
    config = _load_config(args)
    log_dir = Path(config["log"]["path"]).parent

    try:
        place = _resolve_location(args, config)
        display_name = place.name
        start = _parse_start(args.start)
        days = args.days if args.days is not None else config["range"]["days"]
        if days < 1:
            print("[error] --days must be at least 1.")
            raise SystemExit(1)

        kind = range_kind(start, start + timedelta(days=days - 1))
        print(f"Fetching {days} day(s) ({kind}) for {display_name}...")

        result = fetch_range(
            place.coordinate,
            start,
            days=days,
            history_years=config["range"]["history_years"],
            on_progress=_print_progress,
        )
    except RuntimeError as e:
        # NoDataError included
        print(f"[error] {e}")
        log_event("ERROR", str(e))
        write_last_run("ERROR", str(e).replace("|", "-"), log_dir=log_dir)
        raise SystemExit(1)

    print()
    print(render_range_table(result, display_name))

    if args.chart:
        print()
        print(render_temperature_chart(result))

    if args.hourly:
        for record in result:
            print()
            print(render_hourly_table(record))

    predicted = sum(1 for d in result if d.is_prediction)
    detail = f"{len(result)}/{days} day(s), {predicted} predicted"
    log_event("INFO", f"Range for {display_name} from {start.isoformat()}: {detail}")
    write_last_run("OK", detail, log_dir=log_dir)


def cmd_current(args) -> None:
    """Print current conditions for a location."""
    config = _load_config(args)

    try:
        place = _resolve_location(args, config)
        current = fetch_current(place.coordinate, imperial=args.imperial)
    except RuntimeError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    units = current["units"]
    print(f"\n📍 {place.name} — now")
    print(f"🌤  Conditions:     {current['description']}")
    print(f"🌡  Temperature:    {current['temperature']}{units['temperature']}")
    print(f"💧 Humidity:        {current['humidity']}%")
    print(f"🌧  Precipitation:  {current['precipitation']} {units['precipitation']}")
    print(f"💨 Wind:            {current['wind_speed']} {units['wind_speed']}")


def cmd_status(args) -> None:
    """Show last run info and log file size."""
    try:
        config = load_config(args.config)
        log_path = Path(config["log"]["path"])
    except (FileNotFoundError, ValueError):
        log_path = Path(DEFAULT_CONFIG["log"]["path"])

    last = read_last_run(log_path.parent)
    if last:
        last_run_time = last["timestamp"]
        mark = "✅" if last["status"] == "OK" else "❌"
        last_result = f"{mark} {last['detail']}"
    else:
        last_run_time = "Never"
        last_result = "—"

    if log_path.exists():
        size_kb = log_path.stat().st_size // 1024
        log_info = f"{log_path} ({size_kb} KB)"
    else:
        log_info = f"{log_path} (not created yet)"

    sep = "─" * 45
    print("\n🔧 Weather or Not — Status")
    print(sep)
    print(f"  Last run:    {last_run_time}")
    print(f"  Last result: {last_result}")
    print(f"  Log file:    {log_info}")
    print(sep)


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--location",
        metavar="PLACE",
        default=None,
        help='Look up coordinates by place name, e.g. "Tokyo" or "London, UK"',
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude in decimal degrees")
    parser.add_argument("--lon", type=float, default=None, help="Longitude in decimal degrees")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-or-not",
        description="Observed and history-based predicted weather from NASA POWER",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to config.toml (default: ./config.toml)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_range = subparsers.add_parser("range", help="Weather for a range of days")
    _add_location_args(p_range)
    p_range.add_argument(
        "--start",
        metavar="DATE",
        default=None,
        help="First day as YYYY-MM-DD. Default: today.",
    )
    p_range.add_argument(
        "--days",
        metavar="N",
        type=int,
        default=None,
        help="Number of days to fetch. Default: [range].days or 7.",
    )
    p_range.add_argument("--hourly", action="store_true", help="Also print each day's hourly table")
    p_range.add_argument("--chart", action="store_true", help="Also print a temperature bar chart")

    p_current = subparsers.add_parser("current", help="Current conditions")
    _add_location_args(p_current)
    p_current.add_argument("--imperial", action="store_true", help="Use °F, mph and inches")

    subparsers.add_parser("status", help="Show last run info")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    commands = {
        "range": cmd_range,
        "current": cmd_current,
        "status": cmd_status,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
