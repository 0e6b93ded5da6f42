"""
Exit codes and the loop continuation signal.

Every dispatched operation (builtin or external launch) reports back to the
command loop with a LoopStatus. Exit codes apply only to the interpreter
process itself.
"""

from enum import Enum


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class LoopStatus(Enum):
    """Result of one dispatched command: keep reading or stop the loop."""

    CONTINUE = "continue"
    STOP = "stop"

    @property
    def should_continue(self) -> bool:
        return self is LoopStatus.CONTINUE
