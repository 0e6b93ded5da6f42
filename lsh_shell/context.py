"""
CommandContext - what a builtin command may see of the interpreter.

Builtins receive this through their Process instead of a reference to the
Shell, so they can be exercised without a running command loop.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_ERROR_PREFIX


@dataclass
class CommandContext:
    """
    Encapsulates the state a builtin command can read.

    This provides commands with access to:
    - The prefix that marks interpreter-originated error messages
    - The names of all builtins, in registration order

    Example:
        >>> ctx = CommandContext(builtin_names=('cd', 'help', 'exit'))
        >>> ctx.format_error('cd: /nope: No such file or directory')
        'lsh: cd: /nope: No such file or directory'
    """

    error_prefix: str = DEFAULT_ERROR_PREFIX
    builtin_names: Tuple[str, ...] = ()

    def format_error(self, message: str) -> str:
        """Prefix an error message so it is distinguishable from child output."""
        return f"{self.error_prefix}: {message}"
