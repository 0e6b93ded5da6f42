"""
HELP command - print the usage banner and the list of builtins.
"""

from ..exit_codes import LoopStatus
from ..process import Process
from . import register_command

BANNER_HEADER = (
    "LSH\n"
    "Type program names and arguments, and hit enter.\n"
    "The following are built in:\n"
)
BANNER_FOOTER = "Use the man command for information on other programs.\n"


@register_command('help')
def cmd_help(process: Process) -> LoopStatus:
    """
    Print the usage banner

    Usage: help

    Arguments are ignored.
    """
    process.stdout.write(BANNER_HEADER)
    for name in process.context.builtin_names:
        process.stdout.write(f"  {name}\n")
    process.stdout.write(BANNER_FOOTER)
    return LoopStatus.CONTINUE
