"""Builtin-or-external dispatch for a parsed command"""

import logging

from .builtins import get_builtin
from .command import Command
from .exit_codes import SUCCESS, Status
from .process import Process

logger = logging.getLogger(__name__)


def execute(cmd: Command) -> Status:
    """
    Run cmd as a builtin if its name is one, otherwise as a program.

    A builtin's status is returned unchanged. A command with no name
    (blank line) does nothing.
    """
    if cmd.name is None:
        return SUCCESS

    builtin = get_builtin(cmd.name)
    if builtin is not None:
        logger.debug("builtin %s", cmd.name)
        return builtin(cmd)

    return Process.from_command(cmd).execute()
