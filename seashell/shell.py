"""
The interactive read-eval loop.

Shell owns one Command per iteration: it reads a line, runs it through the
tokenizer, the redirection resolver and the dispatcher, reports anything
that went wrong, and releases the Command before reading the next line.
"""

import logging
import os
from typing import Optional

import click

from .command import Command
from .context import ShellConfig
from .dispatcher import execute
from .exceptions import ShellError
from .exit_codes import Status, StatusKind
from .lexer import split_line
from .prompt import format_prompt
from .reader import read_line
from .redirection import resolve_redirections

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    StatusKind.NONSTANDARD_EXIT: "sea: command had a non-standard exit",
    StatusKind.EXEC_FAILED: "sea: command not found",
    StatusKind.SPAWN_FAILED: "sea: failed to create process",
    StatusKind.INPUT_REDIRECT_FAILED: "sea: failed to open file for input",
    StatusKind.OUTPUT_REDIRECT_FAILED: "sea: failed to open file for output",
    StatusKind.REDIRECT_CONFLICT: "sea: cannot truncate file (>) and append to file (>>)",
    StatusKind.CHDIR_FAILED: "cd: no such file or directory",
    StatusKind.ALLOCATION_FAILED: "sea: failed to allocate memory",
    StatusKind.READ_FAILED: "sea: failed to read line",
}


def current_directory() -> str:
    """Working directory for the prompt, even if it has been removed."""
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug("getcwd failed: %s", e)
        return os.environ.get('PWD') or "?"


class Shell:
    """Line-oriented command interpreter"""

    def __init__(self, config: Optional[ShellConfig] = None):
        self.config = config or ShellConfig()

    def show_prompt(self):
        if self.config.show_cwd:
            text = format_prompt(current_directory(), self.config.home, self.config.prompt_symbol)
        else:
            text = self.config.prompt_symbol
        click.echo(text, nl=False)

    def run_line(self, cmd: Command) -> Status:
        """
        Tokenize, resolve and execute a command whose line is already read.

        Parse errors are returned as their status; the command is not run.
        """
        try:
            split_line(cmd)
            resolve_redirections(cmd)
        except ShellError as e:
            logger.debug("parse failed: %s", e)
            return e.status
        return execute(cmd)

    def prompt_once(self) -> Status:
        """
        Prompt for, read and run a single command.

        The command is released afterwards whatever the outcome.
        """
        cmd = Command()
        try:
            self.show_prompt()
            try:
                status = read_line(cmd, self.config.stdin)
            except ShellError as e:
                logger.debug("read failed: %s", e)
                return e.status
            if status:
                return status
            return self.run_line(cmd)
        finally:
            cmd.release()

    @staticmethod
    def report_error(status: Status):
        """Print the diagnostic for status to stderr, if it has one."""
        message = ERROR_MESSAGES.get(status.kind)
        if message is None:
            logger.debug("no diagnostic for %s", status)
            return
        click.echo(message, err=True)

    def run(self) -> int:
        """
        Run until exit is requested or input ends.

        Returns:
            Exit code for the host process (always 0)
        """
        click.echo()
        while True:
            status = self.prompt_once()
            if status.is_exit:
                return 0
            if status:
                self.report_error(status)
            click.echo()
