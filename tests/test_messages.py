"""Tests for summary message selection."""

import pytest

from preflyt.modules.interpret import message_pool, pick_message, pick_random
from preflyt.modules.interpret.messages import (
    MESSAGES_CLEAN,
    MESSAGES_FEW,
    MESSAGES_HIGH,
    MESSAGES_MANY,
    MESSAGES_SOME,
)
from preflyt.modules.scan import ScanResult


def _result(total: int, severities: list[str] | None = None) -> ScanResult:
    severities = severities if severities is not None else ["low"] * total
    return ScanResult.from_dict(
        {
            "status": "issues_found" if total else "clean",
            "total_issues": total,
            "findings": [{"title": f"t{i}", "severity": s} for i, s in enumerate(severities)],
        }
    )


class TestMessagePool:
    @pytest.mark.parametrize(
        ("total", "pool"),
        [
            (0, MESSAGES_CLEAN),
            (1, MESSAGES_FEW),
            (2, MESSAGES_FEW),
            (3, MESSAGES_SOME),
            (5, MESSAGES_SOME),
            (6, MESSAGES_MANY),
            (40, MESSAGES_MANY),
        ],
    )
    def test_pool_by_issue_count(self, total, pool):
        assert message_pool(_result(total)) is pool

    @pytest.mark.parametrize("severity", ["high", "critical"])
    def test_high_severity_wins(self, severity):
        assert message_pool(_result(9, ["low"] * 8 + [severity])) is MESSAGES_HIGH
        assert message_pool(_result(1, [severity])) is MESSAGES_HIGH


class TestPickRandom:
    def test_first_and_last_entries(self):
        pool = ("a", "b", "c")
        assert pick_random(pool, lambda: 0.0) == "a"
        assert pick_random(pool, lambda: 0.999) == "c"

    def test_out_of_range_source_is_clamped(self):
        assert pick_random(("a", "b"), lambda: 1.0) == "b"

    def test_pick_message_is_deterministic_with_pinned_source(self, fixed_rng):
        result = _result(0)
        assert pick_message(result, fixed_rng) == MESSAGES_CLEAN[0]
        assert pick_message(result, fixed_rng) == pick_message(result, fixed_rng)
