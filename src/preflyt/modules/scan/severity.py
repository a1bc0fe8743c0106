"""Severity ranking and ordering helpers."""

from collections.abc import Iterable

from .models import Finding

SEVERITY_RANK: dict[str, int] = {"critical": 4, "high": 3, "medium": 2, "low": 1, "info": 0}

DEFAULT_FAIL_ON = "high"
FAIL_ON_CHOICES = ("critical", "high", "medium", "low")


def severity_rank(severity: str | None) -> int:
    """Return the rank of a severity; unknown values rank as info."""
    if not isinstance(severity, str):
        return 0
    return SEVERITY_RANK.get(severity, 0)


def normalize_fail_on(level: str | None) -> str:
    """Resolve a ``--fail-on`` value, falling back to ``high``."""
    name = level.strip().lower() if isinstance(level, str) else ""
    return name if name in FAIL_ON_CHOICES else DEFAULT_FAIL_ON


def threshold_rank(level: str | None) -> int:
    return SEVERITY_RANK[normalize_fail_on(level)]


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Return findings ordered by severity, most severe first.

    ``sorted`` is stable, so equal severities keep their input order.
    """
    return sorted(findings, key=lambda finding: severity_rank(finding.severity), reverse=True)


def has_severity_at_least(findings: Iterable[Finding], rank: int) -> bool:
    return any(severity_rank(finding.severity) >= rank for finding in findings)
