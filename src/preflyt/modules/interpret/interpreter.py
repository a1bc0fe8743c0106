"""Turn a scan result into a message, an optional report link and an exit code."""

import logging
import random
from dataclasses import dataclass

from preflyt.modules.scan.client import ScanClient
from preflyt.modules.scan.errors import ScanError
from preflyt.modules.scan.models import ScanResult
from preflyt.utils.debug import debug_print

from .exit_policy import FailFlags, exit_code
from .messages import RandomSource, pick_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interpretation:
    """Everything the renderer and the exit path need, resolved up front."""

    message: str | None
    report_url: str | None
    exit_code: int


class ResultInterpreter:
    """Decides message, report persistence and exit code for a result."""

    def __init__(self, client: ScanClient | None = None, rng: RandomSource = random.random):
        self.client = client
        self.rng = rng

    async def interpret(
        self,
        result: ScanResult,
        flags: FailFlags,
        target_url: str | None = None,
    ) -> Interpretation:
        message = None
        report_url = None

        if result.is_completed:
            message = pick_message(result, self.rng)
            report_url = await self.resolve_report_url(result, message, target_url)

        return Interpretation(message=message, report_url=report_url, exit_code=exit_code(result, flags))

    async def resolve_report_url(
        self,
        result: ScanResult,
        message: str | None,
        target_url: str | None = None,
    ) -> str | None:
        """Create a shareable report; any failure yields None."""
        if self.client is None:
            return None
        try:
            report = await self.client.create_report(result, message, target_url)
        except ScanError as exc:
            logger.debug("Report creation failed: %s", exc)
            debug_print("report", "Report creation failed; using default link", Error=str(exc))
            return None
        return report.url
