"""
HELP command - list the builtin commands.
"""

import click

from ..command import Command
from ..exit_codes import SUCCESS, Status
from . import BUILTINS, register_command

BANNER = "==========  Seashell: A Unix Shell  =========="


@register_command('help')
def cmd_help(cmd: Command) -> Status:
    """
    Print a banner and the builtin command names

    Usage: help
    """
    click.echo(BANNER)
    click.echo("Builtin Commands:")
    for name in BUILTINS:
        click.echo(f"  {name}")
    return SUCCESS
