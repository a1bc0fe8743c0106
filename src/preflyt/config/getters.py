"""Configuration getter functions."""

import os
from typing import Any

from .env_loader import load_global_config


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    global_config = load_global_config()
    if key in global_config and global_config[key] not in (None, ""):
        return global_config[key]

    return default


def get_api_key() -> str | None:
    """Get the Pro API key, if one is configured."""
    value = get_config("PREFLYT_API_KEY")
    return str(value) if value else None


def get_scan_endpoint(default: str) -> str:
    return str(get_config("PREFLYT_API_URL", default=default))


def get_report_endpoint(default: str) -> str:
    return str(get_config("PREFLYT_REPORT_URL", default=default))


def get_default_timeout(default: int) -> int:
    """Get the scan timeout in seconds; invalid values fall back to default."""
    value = get_config("PREFLYT_TIMEOUT", default=default)
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return default
    return seconds if seconds > 0 else default
