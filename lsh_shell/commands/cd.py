"""
CD command - change the interpreter's working directory.
"""

import logging
import os

from ..exceptions import MissingArgumentError
from ..exit_codes import LoopStatus
from ..process import Process
from . import register_command
from .base import handle_os_error, write_error

logger = logging.getLogger(__name__)


@register_command('cd')
def cmd_cd(process: Process) -> LoopStatus:
    """
    Change the working directory

    Usage: cd <directory>

    The change affects the interpreter and every program it launches
    afterwards. Errors are reported and never end the loop.
    """
    if not process.args:
        write_error(process, str(MissingArgumentError(process.command)), prefix_command=False)
        return LoopStatus.CONTINUE

    path = process.args[0]
    try:
        os.chdir(path)
    except (OSError, ValueError) as e:
        handle_os_error(process, e, path)
        return LoopStatus.CONTINUE

    logger.debug("working directory is now %s", os.getcwd())
    return LoopStatus.CONTINUE
