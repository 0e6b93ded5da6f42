"""
Base utilities for command implementations.

Shared error writers so every builtin reports failures the same way:
``<prefix>: <command>: <details>``.
"""

from ..exceptions import translate_os_error
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        message = f"{process.command}: {message}"
    process.stderr.write(process.context.format_error(message) + "\n")


def handle_os_error(process: Process, error: Exception, path: str):
    """
    Report a failed system call on a path.

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            handle_os_error(process, e, path)
    """
    write_error(process, f"{path}: {translate_os_error(error)}")


__all__ = [
    'write_error',
    'handle_os_error',
]
