"""Scan pipeline: dispatch, interpret, optional report creation."""

from dataclasses import dataclass

from preflyt.config import PreflytSettings
from preflyt.modules.interpret import FailFlags, Interpretation, ResultInterpreter
from preflyt.modules.interpret.messages import RandomSource
from preflyt.modules.scan import ScanClient, ScanRequest, ScanResult


@dataclass(frozen=True)
class CheckOutcome:
    """A completed scan with its interpretation."""

    result: ScanResult
    interpretation: Interpretation


async def run_check(
    request: ScanRequest,
    settings: PreflytSettings,
    flags: FailFlags,
    rng: RandomSource,
    client_factory=ScanClient,
) -> CheckOutcome:
    """Scan, then resolve message, report link and exit code.

    The report call only starts after the scan returns. ScanError from the
    scan propagates; report failures do not.
    """
    async with client_factory(settings) as client:
        result = await client.perform_scan(request)
        interpreter = ResultInterpreter(client=client, rng=rng)
        interpretation = await interpreter.interpret(result, flags, target_url=request.url)
    return CheckOutcome(result=result, interpretation=interpretation)
