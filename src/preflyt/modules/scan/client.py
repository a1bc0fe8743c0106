"""Async client for the remote scan and report APIs."""

import asyncio
import json
import logging
from typing import Any

import httpx

from preflyt.config import PreflytSettings
from preflyt.utils.debug import debug_print, redact_payload

from .errors import ScanError
from .models import Report, ScanRequest, ScanResult
from .report_payload import build_report_payload

logger = logging.getLogger(__name__)


class ScanClient:
    """Dispatches scan and report requests.

    Each call carries its own deadline covering the whole exchange
    (connect, send and full body read); an expired deadline cancels the
    in-flight request.
    """

    def __init__(
        self,
        settings: PreflytSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or PreflytSettings()
        self.transport = transport
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            transport=self.transport,
            headers={"User-Agent": self.settings.user_agent},
            follow_redirects=False,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def perform_scan(self, request: ScanRequest) -> ScanResult:
        """Run a scan and return the decoded result.

        Raises:
            ScanError: on timeout, transport failure, non-200 status or an
                unparsable body.
        """
        payload = request.to_payload()
        debug_print("http", f"POST {self.settings.scan_endpoint}", Payload=redact_payload(payload))
        response = await self._post_json(self.settings.scan_endpoint, payload, request.timeout)

        if response.status_code != 200:
            raise ScanError(_error_message(response), kind="http")

        data = _decode_json(response)
        if not isinstance(data, dict):
            raise ScanError("Invalid JSON response", kind="invalid_response")
        return ScanResult.from_dict(data)

    async def create_report(
        self,
        result: ScanResult,
        message: str | None,
        target_url: str | None = None,
    ) -> Report:
        """Persist a shareable report for a completed scan.

        Raises:
            ScanError: on any failure; callers treat this as non-fatal.
        """
        payload = build_report_payload(result, message, target_url)
        debug_print("report", f"POST {self.settings.report_endpoint}", Findings=len(result.findings))
        response = await self._post_json(
            self.settings.report_endpoint, payload, self.settings.report_timeout
        )

        if response.status_code != 200:
            raise ScanError("Failed to create report", kind="http")

        data = _decode_json(response, error_message="Invalid report response")
        url = data.get("url") if isinstance(data, dict) else None
        if not isinstance(url, str) or not url:
            raise ScanError("Invalid report response", kind="invalid_response")
        return Report(url=url)

    async def _post_json(self, url: str, payload: dict[str, Any], timeout: float) -> httpx.Response:
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            response = await asyncio.wait_for(
                self.client.post(url, json=payload, timeout=timeout),
                timeout=timeout,
            )
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise ScanError("timeout", kind="timeout") from exc
        except httpx.HTTPError as exc:
            raise ScanError(str(exc) or exc.__class__.__name__, kind="transport") from exc
        except OSError as exc:
            raise ScanError(str(exc) or exc.__class__.__name__, kind="transport") from exc

        debug_print("http", f"← {response.status_code}", Bytes=len(response.content))
        return response


def _decode_json(response: httpx.Response, error_message: str = "Invalid JSON response") -> Any:
    try:
        return json.loads(response.text)
    except ValueError as exc:
        raise ScanError(error_message, kind="invalid_response") from exc


def _error_message(response: httpx.Response) -> str:
    """Extract ``detail`` or ``message`` from an error body, else ``HTTP <status>``."""
    fallback = f"HTTP {response.status_code}"
    try:
        data = json.loads(response.text)
    except ValueError:
        return fallback
    if not isinstance(data, dict):
        return fallback
    for key in ("detail", "message"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return fallback


async def scan(url: str, api_key: str | None = None, timeout: int | None = None) -> ScanResult:
    """Run a scan programmatically.

    No rendering or exit-code side effects; errors propagate as ScanError.
    """
    from preflyt.config import load_settings

    settings = load_settings()
    request = ScanRequest(url=url, api_key=api_key, timeout=timeout or settings.default_timeout)
    async with ScanClient(settings) as client:
        return await client.perform_scan(request)
