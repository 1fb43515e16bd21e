"""Configuration management for ctcopy."""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "notification_enabled": True,
    "notification_title": "Clipboard Manager",
    "notification_timeout": 3,
    "error_title": "Error",
    "encoding": "utf-8",
}


def get_config_dir() -> Path:
    """Return the platform-specific config directory."""
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
        return Path(base) / "ctcopy"
    elif system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ctcopy"
    else:  # Linux and others
        xdg = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        return Path(xdg) / "ctcopy"


def get_config_path() -> Path:
    """Return the path to the configuration file."""
    return get_config_dir() / "config.json"


def _valid_type(value: Any, default: Any) -> bool:
    """Whether ``value`` can stand in for ``default``."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, type(default))


def load_config() -> dict[str, Any]:
    """Load configuration from disk, falling back to defaults.

    Values whose type does not match the default are ignored.
    """
    config = dict(DEFAULT_CONFIG)
    config_path = get_config_path()
    if not config_path.exists():
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError("top-level value must be an object")
    except (ValueError, OSError) as e:
        logger.warning("Ignoring config file %s: %s", config_path, e)
        return config

    for key, value in user_config.items():
        if key not in DEFAULT_CONFIG:
            logger.debug("Unknown config key %r in %s", key, config_path)
            continue
        default = DEFAULT_CONFIG[key]
        if not _valid_type(value, default):
            logger.warning(
                "Ignoring config value %s=%r in %s; using %r",
                key, value, config_path, default,
            )
            continue
        config[key] = value
    return config
