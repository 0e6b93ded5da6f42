"""
Shell - the read, tokenize, dispatch loop.

Each iteration prints the prompt, reads one line, splits it into tokens and
hands them to a builtin or to the process launcher. The loop stops when a
command returns LoopStatus.STOP or the input is exhausted.
"""

import logging
import sys
from typing import Optional, TextIO

from .builtins import BuiltinRegistry, default_registry
from .config import ShellConfig
from .context import CommandContext
from .exit_codes import EXIT_SUCCESS, LoopStatus
from .launcher import ProcessLauncher
from .lexer import TokenList, split_line
from .line_reader import LineReader
from .process import Process

logger = logging.getLogger(__name__)


class Shell:
    """Interactive command interpreter.

    Example:
        >>> shell = Shell(stdin=io.StringIO("help\\nexit\\n"))
        >>> shell.run()
        0
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        registry: Optional[BuiltinRegistry] = None,
        launcher: Optional[ProcessLauncher] = None,
    ):
        self.config = config or ShellConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.registry = registry if registry is not None else default_registry()
        self.launcher = launcher if launcher is not None else ProcessLauncher(
            stdout=self.stdout,
            stderr=self.stderr,
            error_prefix=self.config.error_prefix,
        )
        self.reader = LineReader(self.stdin, bufsize=self.config.line_bufsize)
        self.context = CommandContext(
            error_prefix=self.config.error_prefix,
            builtin_names=self.registry.names(),
        )

    def prompt(self) -> None:
        self.stdout.write(self.config.prompt)
        self.stdout.flush()

    def dispatch(self, tokens: TokenList) -> LoopStatus:
        """
        Run one tokenized command.

        Args:
            tokens: Tokens of the command line

        Returns:
            LoopStatus from the builtin or launcher; CONTINUE for an empty line
        """
        name = tokens.command
        if name is None:
            return LoopStatus.CONTINUE

        executor = self.registry.lookup(name)
        if executor is not None:
            logger.debug("dispatching builtin %r", name)
            process = Process(
                command=name,
                args=list(tokens.args),
                stdout=self.stdout,
                stderr=self.stderr,
                executor=executor,
                context=self.context,
            )
            return process.execute()

        logger.debug("launching external program %r", name)
        return self.launcher.launch(tokens)

    def execute(self, line: str) -> LoopStatus:
        """Tokenize and dispatch a single command line."""
        tokens = split_line(line, bufsize=self.config.token_bufsize)
        return self.dispatch(tokens)

    def step(self) -> LoopStatus:
        """
        One iteration of the loop: prompt, read, execute.

        The line and its tokens live only for the duration of this call.

        Returns:
            LoopStatus.STOP at end of input or after exit
        """
        self.prompt()
        line = self.reader.read_line()
        if line is None:
            return LoopStatus.STOP
        return self.execute(line)

    def run(self) -> int:
        """
        Run the loop until a command or end of input stops it.

        Returns:
            Exit code for the interpreter process (always EXIT_SUCCESS)
        """
        while self.step().should_continue:
            pass
        logger.debug("command loop stopped")
        return EXIT_SUCCESS
