"""Configuration module for commithook.

This module provides access to user configuration stored in one of these locations:
1. $COMMITHOOK_CONFIG_DIR/commithookrc if $COMMITHOOK_CONFIG_DIR is defined
2. $XDG_CONFIG_HOME/commithook/commithookrc if $XDG_CONFIG_HOME is defined
3. $HOME/.commithookrc

The configuration is stored in TOML format, for example:

    [logger]
    verbosity = "DEBUG"

    [validation]
    match_mode = "first-line"
"""

import copy
import logging
import os
import sys
from pathlib import Path
from typing import Any

import tomli

from .validate import DEFAULT_MATCH_MODE, MATCH_MODES

__all__ = [
    "get_config_path",
    "load_config",
    "get_logger_verbosity",
    "get_logger_path",
    "get_match_mode",
]

# Default configuration values
DEFAULT_CONFIG = {
    "logger": {
        "verbosity": "INFO",  # Default logging level
        "path": str(Path.home() / ".commithook"),  # Default logger path
    },
    "validation": {
        "match_mode": DEFAULT_MATCH_MODE,
    },
}


def get_config_path() -> Path:
    """Return the path to the user's config file.

    Checks the following locations in order:
    1. $COMMITHOOK_CONFIG_DIR/commithookrc if $COMMITHOOK_CONFIG_DIR is defined
    2. $XDG_CONFIG_HOME/commithook/commithookrc if $XDG_CONFIG_HOME is defined
    3. Fallback to $HOME/.commithookrc

    Returns:
        Path to the config file
    """
    if "COMMITHOOK_CONFIG_DIR" in os.environ:
        path = Path(os.environ["COMMITHOOK_CONFIG_DIR"]) / "commithookrc"
        if path.exists():
            return path

    if "XDG_CONFIG_HOME" in os.environ:
        path = Path(os.environ["XDG_CONFIG_HOME"]) / "commithook" / "commithookrc"
        if path.exists():
            return path

    return Path.home() / ".commithookrc"


def load_config() -> dict[str, Any]:
    """Load configuration from the config file.

    A missing file yields the defaults. A file that cannot be parsed is
    reported on stderr and the defaults are used instead.

    Returns:
        Dict containing the merged configuration (defaults + user config).
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomli.load(f)

            _merge_configs(config, user_config)
        except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError) as e:
            print(f"Error loading config from {config_path}: {e}", file=sys.stderr)

    return config


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Recursively merge override dict into base dict."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            nested_value: dict[str, Any] = value
            _merge_configs(base[key], nested_value)
        else:
            base[key] = value


def _get_string(config: dict[str, Any] | None, section: str, key: str) -> str:
    """Return config[section][key], or its default if it is not a string.

    Args:
        config: An already loaded config, or None to load it now.
        section: Table name, e.g. "logger".
        key: Key inside the table.
    """
    if config is None:
        config = load_config()
    default = DEFAULT_CONFIG[section][key]
    table = config.get(section)
    value = table.get(key) if isinstance(table, dict) else table
    if not isinstance(value, str):
        logging.warning(
            f"Invalid {section}.{key} {value!r} in config, using {default!r}"
        )
        return default
    return value


def get_logger_verbosity(config: dict[str, Any] | None = None) -> str:
    """Get the configured logger verbosity level.

    Returns:
        String representing the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    return _get_string(config, "logger", "verbosity")


def get_logger_path(config: dict[str, Any] | None = None) -> str:
    """Get the configured logger path, with ~ expanded."""
    return os.path.expanduser(_get_string(config, "logger", "path"))


def get_match_mode(config: dict[str, Any] | None = None) -> str:
    """Get the configured match mode for multi-line commit messages.

    Returns:
        "whole" or "first-line". Unknown values fall back to the default.
    """
    mode = _get_string(config, "validation", "match_mode")
    if mode not in MATCH_MODES:
        logging.warning(
            f"Unknown match_mode {mode!r} in config, using {DEFAULT_MATCH_MODE!r}"
        )
        return DEFAULT_MATCH_MODE
    return mode
