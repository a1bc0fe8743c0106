"""Result interpretation and exit policy."""

from .exit_policy import EXIT_BLOCK, EXIT_OK, FailFlags, exit_code, should_fail
from .interpreter import Interpretation, ResultInterpreter
from .messages import message_pool, pick_message, pick_random

__all__ = [
    "EXIT_BLOCK",
    "EXIT_OK",
    "FailFlags",
    "Interpretation",
    "ResultInterpreter",
    "exit_code",
    "message_pool",
    "pick_message",
    "pick_random",
    "should_fail",
]
