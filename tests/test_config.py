# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_config.py — Tests for config loading and validation.

We write a temporary TOML file in each test so we don't depend on
a real config.toml existing in the project.
"""

import pytest

from weather_or_not.config import load_config


VALID_TOML = """
[location]
latitude = 37.0
longitude = -122.0
name = "Santa Cruz, CA"

[range]
days = 10
history_years = 3

[log]
path = "logs/weather_or_not.log"
"""

MINIMAL_TOML = """
[location]
latitude = 37.0
longitude = -122.0
name = "Santa Cruz, CA"

[log]
path = "logs/weather_or_not.log"
"""


def _write(tmp_path, text: str):
    config_file = tmp_path / "config.toml"
    config_file.write_text(text)
    return config_file


def test_load_valid_config(tmp_path):
    config = load_config(_write(tmp_path, VALID_TOML))

    assert config["location"]["name"] == "Santa Cruz, CA"
    assert config["range"]["days"] == 10
    assert config["range"]["history_years"] == 3


def test_range_section_defaults(tmp_path):
    """[range] is optional and falls back to 7 days / 5 years."""
    config = load_config(_write(tmp_path, MINIMAL_TOML))

    assert config["range"] == {"days": 7, "history_years": 5}


def test_partial_range_section_keeps_other_default(tmp_path):
    config = load_config(_write(tmp_path, MINIMAL_TOML + "\n[range]\ndays = 3\n"))

    assert config["range"] == {"days": 3, "history_years": 5}


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.toml")


def test_missing_section_raises(tmp_path):
    bad_toml = "[location]\nlatitude = 1.0\nlongitude = 2.0\nname = 'X'\n"
    with pytest.raises(ValueError, match="Missing required config section"):
        load_config(_write(tmp_path, bad_toml))


def test_missing_key_raises(tmp_path):
    bad_toml = MINIMAL_TOML.replace('name = "Santa Cruz, CA"\n', "")
    with pytest.raises(ValueError, match="name"):
        load_config(_write(tmp_path, bad_toml))


@pytest.mark.parametrize("value", ["0", "-2", "2.5", '"seven"', "true"])
def test_invalid_range_days_raises(tmp_path, value):
    with pytest.raises(ValueError, match=r"\[range\].days"):
        load_config(_write(tmp_path, MINIMAL_TOML + f"\n[range]\ndays = {value}\n"))
