"""Report API payload construction."""

from typing import Any

from .models import Finding, ScanResult


def _report_finding(finding: Finding, target_url: str) -> dict[str, Any]:
    # The report schema is richer than what the CLI endpoint returns; the
    # analysis fields are sent empty.
    return {
        "id": finding.title,
        "type": "cli",
        "severity": finding.severity,
        "title": finding.title,
        "summary": "",
        "affected": {"url": target_url, "path": ""},
        "evidence": {"signals": [], "examples": []},
        "why_it_matters": "",
        "how_to_fix": {"general": "", "examples": {}},
        "confidence": "high",
        "source": {"templates": [], "engine": "cli"},
    }


def build_report_payload(
    result: ScanResult,
    message: str | None,
    target_url: str | None = None,
) -> dict[str, Any]:
    """Build the body for the report-creation call."""
    url = result.url or target_url or ""
    categories = result.raw.get("categories") if isinstance(result.raw, dict) else None
    return {
        "target_url": url,
        "findings": [_report_finding(finding, url) for finding in result.findings],
        "categories": categories or None,
        "total_issues": result.total_issues,
        "scan_time_seconds": result.scan_time_seconds or 0,
        "message": message or None,
    }
