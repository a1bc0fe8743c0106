"""Summary quips shown after a completed scan."""

import random
from collections.abc import Callable, Sequence

from preflyt.modules.scan.models import ScanResult

RandomSource = Callable[[], float]

MESSAGES_CLEAN = (
    "Your deployment is cleaner than my git history. Ship it.",
    "Zero issues. Either you're cracked or your app does nothing. Either way, congrats.",
    "We checked everything. You're suspiciously secure.",
    "Nothing found. You may now mass-reply 'skill issue' to everyone who gets hacked.",
)

MESSAGES_FEW = (
    "99% there. Just a couple things standing between you and a clean conscience.",
    "Almost perfect. Almost.",
)

MESSAGES_SOME = (
    "Not bad, not great. Your app is the C+ student of security.",
    "A few open doors. Nothing catastrophic, but your .env file is sweating.",
    "Found some things. The kind that make you say 'I'll fix it later' and then never do. "
    "Fix them now.",
)

MESSAGES_MANY = (
    "Your deployment is giving 'I'll add security later.' It's later.",
    "We found more issues than you have users. Let's fix that ratio.",
    "This is why we exist. Deep breaths. Start with the red ones.",
)

MESSAGES_HIGH = (
    "Someone left the keys in the ignition. On a highway. At night.",
    "Your database said hi. From the public internet. Fix this immediately.",
)

_HIGH_SEVERITIES = {"high", "critical"}


def pick_random(pool: Sequence[str], rng: RandomSource = random.random) -> str:
    """Pick one entry from ``pool`` using a float source in [0, 1)."""
    index = int(rng() * len(pool))
    return pool[min(max(index, 0), len(pool) - 1)]


def message_pool(result: ScanResult) -> Sequence[str]:
    """Select the message pool for a result.

    A high or critical finding wins over the issue count.
    """
    if any(finding.severity in _HIGH_SEVERITIES for finding in result.findings):
        return MESSAGES_HIGH

    count = result.total_issues
    if count == 0:
        return MESSAGES_CLEAN
    if count <= 2:
        return MESSAGES_FEW
    if count <= 5:
        return MESSAGES_SOME
    return MESSAGES_MANY


def pick_message(result: ScanResult, rng: RandomSource = random.random) -> str:
    return pick_random(message_pool(result), rng)
