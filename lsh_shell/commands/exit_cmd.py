"""
EXIT command - stop the command loop.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

from ..exit_codes import LoopStatus
from ..process import Process
from . import register_command


@register_command('exit')
def cmd_exit(process: Process) -> LoopStatus:
    """
    Leave the interpreter

    Usage: exit

    Arguments are ignored; the interpreter always exits with status 0.
    """
    return LoopStatus.STOP
