"""Tests for scan data models and severity ordering."""

import pytest

from preflyt.modules.scan import (
    Finding,
    ScanRequest,
    ScanResult,
    normalize_fail_on,
    severity_rank,
    sort_findings,
    threshold_rank,
)


class TestScanRequest:
    def test_payload_includes_null_api_key(self):
        request = ScanRequest(url="https://mysite.com")
        assert request.to_payload() == {"url": "https://mysite.com", "api_key": None}

    def test_payload_carries_api_key(self):
        request = ScanRequest(url="https://mysite.com", api_key="sk_live_abc", timeout=30)
        assert request.to_payload()["api_key"] == "sk_live_abc"

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValueError):
            ScanRequest(url="https://mysite.com", timeout=timeout)

    def test_is_immutable(self):
        request = ScanRequest(url="https://mysite.com")
        with pytest.raises(AttributeError):
            request.url = "https://other.com"  # type: ignore[misc]


class TestScanResult:
    def test_from_dict_decodes_fields(self, issues_payload):
        result = ScanResult.from_dict(issues_payload)

        assert result.status == "issues_found"
        assert result.total_issues == 4
        assert len(result.findings) == 4
        assert result.findings[1] == Finding("Exposed .env file", "critical", "file_exposure")
        assert result.categories["http_hardening"].count == 2
        assert result.scan_time_seconds == 7.5
        assert result.raw is issues_payload

    def test_from_dict_tolerates_missing_fields(self):
        result = ScanResult.from_dict({"status": "clean"})

        assert result.total_issues == 0
        assert result.findings == ()
        assert result.categories == {}
        assert result.scan_time_seconds is None
        assert result.message is None

    def test_negative_or_bogus_counts_become_zero(self):
        assert ScanResult.from_dict({"status": "clean", "total_issues": -3}).total_issues == 0
        assert ScanResult.from_dict({"status": "clean", "total_issues": "lots"}).total_issues == 0

    def test_completed_statuses(self, clean_result, issues_result):
        assert clean_result.is_completed
        assert issues_result.is_completed
        assert not ScanResult.from_dict({"status": "limit_reached"}).is_completed
        assert not ScanResult.from_dict({"status": "error"}).is_completed

    def test_count_mismatch_only_for_issues(self, issues_payload):
        issues_payload["total_issues"] = 5
        assert ScanResult.from_dict(issues_payload).count_mismatch
        assert not ScanResult.from_dict({"status": "clean", "total_issues": 2}).count_mismatch


class TestSeverity:
    def test_rank_table(self):
        assert [severity_rank(s) for s in ("critical", "high", "medium", "low", "info")] == [
            4,
            3,
            2,
            1,
            0,
        ]

    def test_unknown_severity_ranks_as_info(self):
        assert severity_rank("catastrophic") == 0
        assert severity_rank(None) == 0

    def test_sort_is_descending_and_stable(self):
        findings = [
            Finding("a", "low"),
            Finding("b", "high"),
            Finding("c", "low"),
            Finding("d", "weird"),
            Finding("e", "high"),
            Finding("f", "info"),
        ]
        ordered = sort_findings(findings)

        assert [f.title for f in ordered] == ["b", "e", "a", "c", "d", "f"]
        assert [f.title for f in findings] == ["a", "b", "c", "d", "e", "f"]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("high", "high"),
            ("MEDIUM", "medium"),
            (" low ", "low"),
            ("critical", "critical"),
            ("info", "high"),
            ("bogus", "high"),
            (None, "high"),
        ],
    )
    def test_normalize_fail_on(self, value, expected):
        assert normalize_fail_on(value) == expected

    def test_threshold_rank(self):
        assert threshold_rank("low") == 1
        assert threshold_rank("nonsense") == 3
