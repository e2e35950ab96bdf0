"""
CD command - change the working directory.
"""

import logging
import os

from ..command import Command
from ..exit_codes import SUCCESS, Status, StatusKind
from . import register_command

logger = logging.getLogger(__name__)


@register_command('cd')
def cmd_cd(cmd: Command) -> Status:
    """
    Change the current working directory

    Usage: cd [dir]

    With no argument, changes to $HOME. If HOME is not set either, does
    nothing. Children spawned afterwards inherit the new directory.
    """
    target = cmd.tokens.get(1)
    if target is None:
        target = os.environ.get('HOME')
        if target is None:
            return SUCCESS

    try:
        os.chdir(target)
    except (OSError, ValueError) as e:
        logger.debug("chdir to %r failed: %s", target, e)
        return Status.named(StatusKind.CHDIR_FAILED)
    return SUCCESS
