"""
Exception hierarchy for lsh-shell.

Errors fall into three groups:
- Fatal errors end the interpreter immediately (allocation failure)
- Command and launch errors are reported to stderr and the loop continues
- Configuration errors are raised before the loop starts

Usage:
    from lsh_shell.exceptions import AllocationError, ExecError

    try:
        buffer.append(char)
    except AllocationError as e:
        stderr.write(f"lsh: {e}\n")
        return e.exit_code
"""

from typing import Optional

from .exit_codes import EXIT_USAGE


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Fatal Errors
# =============================================================================

class FatalError(ShellError):
    """
    Base class for errors the interpreter cannot survive.

    Nothing inside the command loop catches these; they unwind to the
    entry point, which reports them and exits with a failure status.
    """
    pass


class AllocationError(FatalError):
    """
    Raised when a line or token buffer cannot grow.

    Example:
        raise AllocationError()
    """

    def __init__(self, message: str = "allocation error"):
        super().__init__(message, exit_code=1)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ShellError):
    """
    Raised when the shell configuration is invalid.

    Example:
        raise ConfigurationError("line_bufsize", "must be positive")
    """

    def __init__(self, setting: str, details: str):
        message = f"invalid {setting}: {details}"
        super().__init__(message, exit_code=EXIT_USAGE)
        self.setting = setting


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for builtin command errors.

    Raised when a builtin cannot carry out its operation.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class MissingArgumentError(CommandError):
    """
    Raised when a builtin is called without a required operand.

    Example:
        raise MissingArgumentError("cd")
    """

    def __init__(self, command: str):
        message = f'expected argument to "{command}"'
        super().__init__(command, message, exit_code=1)


# =============================================================================
# Launch Errors
# =============================================================================

class LaunchError(ShellError):
    """
    Base class for failures while starting an external program.

    Attributes:
        strerror: The operating system's description of the failure
    """

    def __init__(self, message: str, strerror: Optional[str] = None):
        super().__init__(message, exit_code=1)
        self.strerror = strerror


class ForkError(LaunchError):
    """
    Raised when a child process cannot be created.

    Example:
        raise ForkError("Resource temporarily unavailable")
    """

    def __init__(self, strerror: str):
        super().__init__(f"fork: {strerror}", strerror)


class ExecError(LaunchError):
    """
    Raised in the child when the program image cannot be replaced.

    Example:
        raise ExecError("nosuchprog", "No such file or directory")
    """

    def __init__(self, program: str, strerror: str):
        super().__init__(f"{program}: {strerror}", strerror)
        self.program = program


def translate_os_error(error: BaseException) -> str:
    """
    Extract a human readable cause from an OS-level exception.

    OSError carries strerror; other exceptions (ValueError for an embedded
    null byte, for instance) fall back to their string form.
    """
    strerror = getattr(error, 'strerror', None)
    if strerror:
        return strerror
    return str(error) or error.__class__.__name__
