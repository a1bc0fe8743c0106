"""
Configuration management for preflyt-check.

Supports configuration sources in order of priority:
1. Environment variables (highest priority)
2. Global config file (~/.preflyt/config.yml)
3. Default values (lowest priority)
"""

from .env_loader import global_config_path, load_global_config
from .getters import (
    get_api_key,
    get_config,
    get_default_timeout,
    get_report_endpoint,
    get_scan_endpoint,
)
from .settings import (
    DEFAULT_DETAILS_URL,
    DEFAULT_REPORT_ENDPOINT,
    DEFAULT_SCAN_ENDPOINT,
    DEFAULT_SCAN_TIMEOUT,
    REPORT_TIMEOUT,
    PreflytSettings,
    load_settings,
)

__all__ = [
    # env_loader
    "global_config_path",
    "load_global_config",
    # getters
    "get_api_key",
    "get_config",
    "get_default_timeout",
    "get_report_endpoint",
    "get_scan_endpoint",
    # settings
    "DEFAULT_DETAILS_URL",
    "DEFAULT_REPORT_ENDPOINT",
    "DEFAULT_SCAN_ENDPOINT",
    "DEFAULT_SCAN_TIMEOUT",
    "REPORT_TIMEOUT",
    "PreflytSettings",
    "load_settings",
]
