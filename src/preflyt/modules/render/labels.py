"""Display label tables."""

CATEGORY_ORDER = ("file_exposure", "server_network", "http_hardening")

CATEGORY_LABELS = {
    "file_exposure": "File & Code Exposure",
    "server_network": "Server & Network Security",
    "http_hardening": "HTTP Hardening",
}

SEVERITY_LABELS = {
    "critical": "CRIT",
    "high": "HIGH",
    "medium": "MEDIUM",
    "low": "LOW",
    "info": "INFO",
}

SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "cyan",
    "info": "dim",
}

CATEGORY_LABEL_WIDTH = 28
SEVERITY_LABEL_WIDTH = 8


def category_label(key: str) -> str:
    return CATEGORY_LABELS.get(key, key)


def severity_label(severity: str) -> str:
    """Return the short label; unknown severities are shown upper-cased."""
    return SEVERITY_LABELS.get(severity, severity.upper())
