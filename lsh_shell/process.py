"""Process class for builtin command execution"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from .context import CommandContext
from .exceptions import FatalError
from .exit_codes import LoopStatus

logger = logging.getLogger(__name__)


class Process:
    """Represents a single builtin invocation inside the interpreter"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable[['Process'], LoopStatus]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Arguments following the command name
            stdout: Output stream (defaults to sys.stdout)
            stderr: Error stream (defaults to sys.stderr)
            executor: Callable that executes the command
            context: CommandContext for the command
        """
        self.command = command
        self.args = list(args)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.executor = executor
        self.context = context if context is not None else CommandContext()

    def execute(self) -> LoopStatus:
        """
        Execute the process

        Returns:
            LoopStatus produced by the command; CONTINUE when the command
            failed unexpectedly
        """
        if self.executor is None:
            self.stderr.write(self.context.format_error(f"{self.command}: no such builtin") + "\n")
            return LoopStatus.CONTINUE

        try:
            status = self.executor(self)
        except KeyboardInterrupt:
            raise
        except (FatalError, MemoryError):
            raise
        except Exception as e:
            logger.debug("builtin %r failed: %s", self.command, e)
            self.stderr.write(self.context.format_error(f"{self.command}: {e}") + "\n")
            status = LoopStatus.CONTINUE

        self.stdout.flush()
        self.stderr.flush()

        return status

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
