"""
SEASHELL command - the shell's one joke.
"""

import time

import click

from ..command import Command
from ..exit_codes import SUCCESS, Status
from . import register_command

PUNCHLINE_DELAY = 3.0


@register_command('seashell')
def cmd_seashell(cmd: Command) -> Status:
    """Tell a joke, pausing before the punchline"""
    click.echo("Why did the seashell refuse to code in C?")
    time.sleep(PUNCHLINE_DELAY)
    click.echo("It didn't want to get washed away by the wave of segfaults!")
    return SUCCESS
