"""Helpers for the check command."""

from urllib.parse import urlparse

from preflyt.modules.scan.severity import normalize_fail_on

ALLOWED_SCHEMES = ("http", "https")

__all__ = ["coerce_timeout", "normalize_fail_on", "url_guidance"]


def coerce_timeout(value: str | int | None, default: int) -> int:
    """Parse a ``--timeout`` value; anything but a positive integer yields ``default``."""
    if value is None:
        return default
    try:
        seconds = int(str(value).strip())
    except ValueError:
        return default
    return seconds if seconds > 0 else default


def url_guidance(url: str) -> list[str]:
    """Return guidance lines for an unusable target URL, or an empty list."""
    scheme_hint = "URL must start with http:// or https://"
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return [f"Invalid URL: {url}", scheme_hint]

    scheme = parsed.scheme.lower()
    if scheme in ALLOWED_SCHEMES and hostname:
        return []
    if scheme and scheme not in ALLOWED_SCHEMES and parsed.netloc:
        return [scheme_hint]
    return [f"Invalid URL: {url}", scheme_hint]
