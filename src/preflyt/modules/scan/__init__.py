"""Scan request dispatch and result model."""

from .client import ScanClient, scan
from .errors import ScanError
from .models import (
    STATUS_CLEAN,
    STATUS_ERROR,
    STATUS_ISSUES_FOUND,
    STATUS_LIMIT_REACHED,
    CategoryStatus,
    Finding,
    Report,
    ScanRequest,
    ScanResult,
)
from .report_payload import build_report_payload
from .severity import (
    SEVERITY_RANK,
    normalize_fail_on,
    severity_rank,
    sort_findings,
    threshold_rank,
)

__all__ = [
    "CategoryStatus",
    "Finding",
    "Report",
    "SEVERITY_RANK",
    "STATUS_CLEAN",
    "STATUS_ERROR",
    "STATUS_ISSUES_FOUND",
    "STATUS_LIMIT_REACHED",
    "ScanClient",
    "ScanError",
    "ScanRequest",
    "ScanResult",
    "build_report_payload",
    "normalize_fail_on",
    "scan",
    "severity_rank",
    "sort_findings",
    "threshold_rank",
]
