"""Exit-code policy: the only place a run may block a pipeline."""

from dataclasses import dataclass

from preflyt.modules.scan.models import STATUS_ISSUES_FOUND, ScanResult
from preflyt.modules.scan.severity import DEFAULT_FAIL_ON, has_severity_at_least, threshold_rank

EXIT_OK = 0
EXIT_BLOCK = 1


@dataclass(frozen=True)
class FailFlags:
    """Caller opt-in for a blocking exit code."""

    fail: bool = False
    fail_on: str = DEFAULT_FAIL_ON


def should_fail(result: ScanResult, flags: FailFlags) -> bool:
    """Return True only for an explicit ``--fail`` with a confirmed finding at or above threshold.

    The decision uses the findings list, not ``total_issues``.
    """
    if not flags.fail:
        return False
    if result.status != STATUS_ISSUES_FOUND:
        return False
    return has_severity_at_least(result.findings, threshold_rank(flags.fail_on))


def exit_code(result: ScanResult, flags: FailFlags) -> int:
    return EXIT_BLOCK if should_fail(result, flags) else EXIT_OK
