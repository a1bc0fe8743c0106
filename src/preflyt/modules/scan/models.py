"""Data models for scan requests, findings and results."""

from dataclasses import dataclass, field
from typing import Any

STATUS_CLEAN = "clean"
STATUS_ISSUES_FOUND = "issues_found"
STATUS_LIMIT_REACHED = "limit_reached"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class ScanRequest:
    """A single scan invocation."""

    url: str
    api_key: str | None = None
    timeout: int = 60

    def __post_init__(self) -> None:
        if not isinstance(self.timeout, int) or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number of seconds, got {self.timeout!r}")

    def to_payload(self) -> dict[str, Any]:
        return {"url": self.url, "api_key": self.api_key or None}


@dataclass(frozen=True)
class Finding:
    """An issue reported by the remote scanner."""

    title: str
    severity: str
    category: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        return cls(
            title=str(data.get("title") or ""),
            severity=str(data.get("severity") or "info"),
            category=str(data.get("category") or ""),
        )


@dataclass(frozen=True)
class CategoryStatus:
    """Per-category summary (status and issue count)."""

    status: str
    count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "CategoryStatus":
        if not isinstance(data, dict):
            return cls(status=STATUS_CLEAN)
        return cls(status=str(data.get("status") or STATUS_CLEAN), count=_as_int(data.get("count")))


@dataclass(frozen=True)
class ScanResult:
    """Decoded scan response.

    ``raw`` keeps the payload exactly as received so machine-readable output
    can be emitted verbatim.
    """

    status: str
    url: str = ""
    total_issues: int = 0
    findings: tuple[Finding, ...] = ()
    categories: dict[str, CategoryStatus] = field(default_factory=dict)
    scan_time_seconds: float | None = None
    message: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanResult":
        findings = data.get("findings")
        if not isinstance(findings, list):
            findings = []
        categories = data.get("categories") or {}
        scan_time = data.get("scan_time_seconds")
        return cls(
            status=str(data.get("status") or ""),
            url=str(data.get("url") or ""),
            total_issues=_as_int(data.get("total_issues")),
            findings=tuple(Finding.from_dict(item) for item in findings if isinstance(item, dict)),
            categories=(
                {str(key): CategoryStatus.from_dict(value) for key, value in categories.items()}
                if isinstance(categories, dict)
                else {}
            ),
            scan_time_seconds=scan_time if isinstance(scan_time, (int, float)) else None,
            message=data.get("message") if isinstance(data.get("message"), str) else None,
            raw=data,
        )

    @property
    def is_completed(self) -> bool:
        """True when the scan ran to completion (clean or issues found)."""
        return self.status in (STATUS_CLEAN, STATUS_ISSUES_FOUND)

    @property
    def count_mismatch(self) -> bool:
        return self.status == STATUS_ISSUES_FOUND and self.total_issues != len(self.findings)


@dataclass(frozen=True)
class Report:
    """A persisted, shareable scan report."""

    url: str


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return max(0, int(value))
    return 0
