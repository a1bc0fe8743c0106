"""Test configuration and fixtures for preflyt-check."""

import asyncio
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from preflyt.config import PreflytSettings
from preflyt.modules.scan import ScanResult

TEST_SCAN_ENDPOINT = "https://api.test.local/api/scan/cli"
TEST_REPORT_ENDPOINT = "https://api.test.local/api/report"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Keep tests away from the real ~/.preflyt/config.yml and PREFLYT_* variables."""
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    for key in ("PREFLYT_API_KEY", "PREFLYT_API_URL", "PREFLYT_REPORT_URL", "PREFLYT_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    return temp_dir


@pytest.fixture
def settings() -> PreflytSettings:
    """Settings pointing at test endpoints."""
    return PreflytSettings(
        scan_endpoint=TEST_SCAN_ENDPOINT,
        report_endpoint=TEST_REPORT_ENDPOINT,
        user_agent="preflyt-check/test",
    )


@pytest.fixture
def fixed_rng():
    """Random source that always selects the first message of a pool."""
    return lambda: 0.0


def _finding(title: str, severity: str, category: str = "http_hardening") -> dict[str, Any]:
    return {"title": title, "severity": severity, "category": category}


@pytest.fixture
def clean_payload() -> dict[str, Any]:
    return {
        "status": "clean",
        "url": "https://mysite.com",
        "total_issues": 0,
        "findings": [],
        "categories": {
            "file_exposure": {"status": "clean", "count": 0},
            "server_network": {"status": "clean", "count": 0},
            "http_hardening": {"status": "clean", "count": 0},
        },
        "scan_time_seconds": 4.2,
    }


@pytest.fixture
def issues_payload() -> dict[str, Any]:
    return {
        "status": "issues_found",
        "url": "https://mysite.com",
        "total_issues": 4,
        "findings": [
            _finding("Missing Content-Security-Policy header", "low"),
            _finding("Exposed .env file", "critical", "file_exposure"),
            _finding("Missing HSTS header", "medium"),
            _finding("Open Redis port 6379", "high", "server_network"),
        ],
        "categories": {
            "file_exposure": {"status": "issues", "count": 1},
            "server_network": {"status": "issues", "count": 1},
            "http_hardening": {"status": "issues", "count": 2},
        },
        "scan_time_seconds": 7.5,
    }


@pytest.fixture
def low_only_payload() -> dict[str, Any]:
    return {
        "status": "issues_found",
        "url": "https://mysite.com",
        "total_issues": 7,
        "findings": [_finding(f"Low issue {i}", "low") for i in range(7)],
        "categories": {"http_hardening": {"status": "issues", "count": 7}},
        "scan_time_seconds": 3,
    }


@pytest.fixture
def limit_payload() -> dict[str, Any]:
    return {"status": "limit_reached", "url": "https://mysite.com", "total_issues": 0}


@pytest.fixture
def error_payload() -> dict[str, Any]:
    return {"status": "error", "url": "https://mysite.com", "message": "Target unreachable"}


@pytest.fixture
def clean_result(clean_payload: dict[str, Any]) -> ScanResult:
    return ScanResult.from_dict(clean_payload)


@pytest.fixture
def issues_result(issues_payload: dict[str, Any]) -> ScanResult:
    return ScanResult.from_dict(issues_payload)


@pytest.fixture
def low_only_result(low_only_payload: dict[str, Any]) -> ScanResult:
    return ScanResult.from_dict(low_only_payload)


class StallingTransport(httpx.AsyncBaseTransport):
    """Answers with canned JSON, except for URLs listed in ``stall`` which never answer."""

    def __init__(self, responses: dict[str, Any] | None = None, stall: tuple[str, ...] = ()):
        self.responses = responses or {}
        self.stall = stall
        self.requested: list[str] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url in self.stall:
            await asyncio.sleep(30)
        return httpx.Response(200, json=self.responses.get(url, {}))


@pytest.fixture
def stalling_transport():
    """Factory for transports that stall selected endpoints."""
    return StallingTransport
