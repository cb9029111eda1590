"""
Helper utilities for the Spotlight search box.

Provides:
- Settings loading (TOML merged over defaults)
- Settings file location
"""

import os
from pathlib import Path
from typing import Any, Dict

import toml
from loguru import logger


DEFAULT_SETTINGS = {
    "search": {
        "debounce_ms": 150,
        "min_query_length": 2,
        "max_suggestions": 6,
        "default_engine": "g",
    },
    "engines": {},
}


def settings_path() -> Path:
    """
    Location of settings.toml.

    Returns:
        $XDG_CONFIG_HOME/spotlight/settings.toml, falling back to
        ~/.config/spotlight/settings.toml
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "spotlight" / "settings.toml"


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    """
    Load search box settings from a TOML file.

    Args:
        path: Settings file to read (defaults to settings_path())

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [search]
        debounce_ms = 200
        default_engine = "gh"

        [engines.w]
        name = "Wikipedia"
        query_template = "https://en.wikipedia.org/w/index.php?search="
        homepage = "https://en.wikipedia.org"
    """
    path = path or settings_path()

    if not path.exists():
        logger.info(f"Settings file not found at {path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}. Using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    return validate_settings(_deep_merge(DEFAULT_SETTINGS, loaded))


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace malformed sections and values with their defaults.

    Sections that are not tables fall back wholesale; [search] values must
    have the same type as their defaults (integers must also be positive,
    except min_query_length which may be 0).
    """
    for section, default in DEFAULT_SETTINGS.items():
        if not isinstance(settings.get(section), dict):
            logger.warning(f"Ignoring malformed [{section}] section, expected a table")
            settings[section] = _deep_merge(default, {})

    search = settings["search"]
    for key, default in DEFAULT_SETTINGS["search"].items():
        value = search[key]
        valid = type(value) is type(default)
        if valid and isinstance(default, int):
            valid = value >= 0 if key == "min_query_length" else value > 0
        if not valid:
            logger.warning(f"Invalid search.{key} = {value!r}, using {default!r}")
            search[key] = default

    return settings


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence). Neither input is mutated.
    """
    result = {
        key: _deep_merge(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
