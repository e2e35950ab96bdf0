"""
EXIT command - leave the shell.
"""

from ..command import Command
from ..exit_codes import EXIT_REQUESTED, Status
from . import register_command


@register_command('exit')
def cmd_exit(cmd: Command) -> Status:
    """
    Ask the shell loop to terminate successfully

    Usage: exit

    Arguments are ignored.
    """
    return EXIT_REQUESTED
