"""
Process launcher for external programs.

One external command runs at a time: the interpreter forks, the child
replaces itself with the program through execvp (PATH lookup, inherited
environment), and the parent blocks until that child has exited or been
killed by a signal.
"""

import logging
import os
import sys
from typing import List, NoReturn, Optional, TextIO

from .config import DEFAULT_ERROR_PREFIX
from .exceptions import ExecError, ForkError, translate_os_error
from .exit_codes import EXIT_FAILURE, LoopStatus
from .lexer import TokenList

logger = logging.getLogger(__name__)


class ProcessLauncher:
    """
    Run an external program and wait for it to terminate.

    Attributes:
        last_exit_status: Exit code of the most recent child, the negated
            signal number if it was killed, or None if nothing was waited on
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None,
                 error_prefix: str = DEFAULT_ERROR_PREFIX):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.error_prefix = error_prefix
        self.last_exit_status: Optional[int] = None

    def launch(self, tokens: TokenList) -> LoopStatus:
        """
        Fork, exec the program named by the first token, and wait.

        Args:
            tokens: Non-empty token list; argument zero is the program name

        Returns:
            Always LoopStatus.CONTINUE; a failed program never stops the loop
        """
        argv = tokens.argv()
        if not argv:
            raise ValueError("cannot launch an empty command")

        # Buffered prompt text must not be written twice or after child output
        self._flush()

        try:
            pid = os.fork()
        except OSError as e:
            error = ForkError(translate_os_error(e))
            logger.debug("%s", error)
            self._report(error)
            return LoopStatus.CONTINUE

        if pid == 0:
            self._exec_child(argv)

        logger.debug("started %s as pid %d", argv[0], pid)
        self.last_exit_status = self._wait_for(pid)
        return LoopStatus.CONTINUE

    def _exec_child(self, argv: List[str]) -> NoReturn:
        """Replace the child image; on any failure report and _exit."""
        try:
            try:
                os.execvp(argv[0], argv)
            except (OSError, ValueError) as e:
                self._report(ExecError(argv[0], translate_os_error(e)))
        finally:
            os._exit(EXIT_FAILURE)

    def _wait_for(self, pid: int) -> Optional[int]:
        """
        Block until the child exits or is killed.

        A stopped child is not finished; the wait continues.

        Returns:
            Exit code, negated signal number, or None if the child had
            already been reaped elsewhere
        """
        while True:
            try:
                _, status = os.waitpid(pid, os.WUNTRACED)
            except ChildProcessError as e:
                logger.debug("lost track of pid %d: %s", pid, e)
                self._report(f"wait: {translate_os_error(e)}")
                return None

            if os.WIFEXITED(status):
                exit_code = os.WEXITSTATUS(status)
                logger.debug("pid %d exited with status %d", pid, exit_code)
                return exit_code
            if os.WIFSIGNALED(status):
                signum = os.WTERMSIG(status)
                logger.debug("pid %d killed by signal %d", pid, signum)
                return -signum
            if os.WIFSTOPPED(status):
                logger.debug("pid %d stopped by signal %d, still waiting",
                             pid, os.WSTOPSIG(status))

    def _report(self, error) -> None:
        self.stderr.write(f"{self.error_prefix}: {error}\n")
        self.stderr.flush()

    def _flush(self) -> None:
        self.stdout.flush()
        self.stderr.flush()
