"""Immutable runtime settings for the scan client."""

from dataclasses import dataclass

from preflyt.version import get_version

from .getters import get_default_timeout, get_report_endpoint, get_scan_endpoint

DEFAULT_SCAN_ENDPOINT = "https://api.preflyt.dev/api/scan/cli"
DEFAULT_REPORT_ENDPOINT = "https://api.preflyt.dev/api/report"
DEFAULT_DETAILS_URL = "https://preflyt.dev"
DEFAULT_PRICING_URL = "https://preflyt.dev/pricing"
DEFAULT_SCAN_TIMEOUT = 60
REPORT_TIMEOUT = 10
FREE_SCAN_LIMIT = 3


@dataclass(frozen=True)
class PreflytSettings:
    """Endpoints, links and timeouts used by a run."""

    scan_endpoint: str = DEFAULT_SCAN_ENDPOINT
    report_endpoint: str = DEFAULT_REPORT_ENDPOINT
    details_url: str = DEFAULT_DETAILS_URL
    pricing_url: str = DEFAULT_PRICING_URL
    default_timeout: int = DEFAULT_SCAN_TIMEOUT
    report_timeout: int = REPORT_TIMEOUT
    free_scan_limit: int = FREE_SCAN_LIMIT
    user_agent: str = ""

    def __post_init__(self) -> None:
        if not self.user_agent:
            object.__setattr__(self, "user_agent", f"preflyt-check/{get_version()}")


def load_settings() -> PreflytSettings:
    """Build settings from the environment and ~/.preflyt/config.yml."""
    return PreflytSettings(
        scan_endpoint=get_scan_endpoint(DEFAULT_SCAN_ENDPOINT),
        report_endpoint=get_report_endpoint(DEFAULT_REPORT_ENDPOINT),
        default_timeout=get_default_timeout(DEFAULT_SCAN_TIMEOUT),
    )
