# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.
"""

import copy
import tomllib
from pathlib import Path


DEFAULT_CONFIG_PATH = Path("config.toml")

# Used by the CLI when there is no config file but a location was given.
DEFAULT_CONFIG = {
    "range": {"days": 7, "history_years": 5},
    "log": {"path": "logs/weather_or_not.log"},
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Missing optional values are filled in from DEFAULT_CONFIG.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your location."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)

    range_cfg = copy.deepcopy(DEFAULT_CONFIG["range"])
    range_cfg.update(config.get("range", {}))
    config["range"] = range_cfg
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [location]
        latitude  = <float>   # decimal degrees, e.g. 37.0
        longitude = <float>   # decimal degrees, e.g. -122.0
        name      = <str>     # display name, e.g. "Santa Cruz, CA"

        [range]               # optional
        days          = <int> # days per range fetch, >= 1 (default 7)
        history_years = <int> # past years per prediction, >= 1 (default 5)

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a value
            is out of range.
    """
    for section in ("location", "log"):
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    location = config["location"]
    for key in ("latitude", "longitude", "name"):
        if key not in location:
            raise ValueError(f"Missing required config key: [location].{key}")

    if "path" not in config["log"]:
        raise ValueError("Missing required config key: [log].path")

    for key in ("days", "history_years"):
        value = config.get("range", {}).get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"Invalid config value: [range].{key} must be an integer >= 1")
