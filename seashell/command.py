"""
Command - one line of input on its way to execution.

A Command is filled in stage by stage (read, tokenize, resolve
redirections), executed once and then released by the loop that owns it.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import TokenSequence


class CommandFlags(enum.Flag):
    """Redirection directives recognized on the command line."""

    NONE = 0
    INPUT_REDIRECT = enum.auto()
    OUTPUT_TRUNCATE = enum.auto()
    OUTPUT_APPEND = enum.auto()


@dataclass
class Command:
    """
    A single shell command.

    Attributes:
        line: Raw input line, newline included
        name: First token, the operation to run
        tokens: Token spans into line (name plus arguments)
        input_redirect_file: File to read stdin from, if requested
        output_redirect_file: File to write stdout to, if requested
        flags: Which redirections were requested

    Example:
        >>> from seashell.lexer import split_line
        >>> cmd = Command(line="echo hi\\n")
        >>> split_line(cmd)
        >>> cmd.name, cmd.argv
        ('echo', ['echo', 'hi'])
    """

    line: Optional[str] = None
    name: Optional[str] = None
    tokens: Optional[TokenSequence] = None
    input_redirect_file: Optional[str] = None
    output_redirect_file: Optional[str] = None
    flags: CommandFlags = field(default=CommandFlags.NONE)

    def has_flag(self, flag: CommandFlags) -> bool:
        return bool(self.flags & flag)

    def set_flag(self, flag: CommandFlags):
        self.flags |= flag

    @property
    def argv(self) -> List[str]:
        """Argument vector for the command, name included."""
        if self.tokens is None:
            return []
        return self.tokens.to_list()

    @property
    def args(self) -> List[str]:
        """Arguments after the command name."""
        return self.argv[1:]

    def release(self):
        """Drop the line and every token that refers to it."""
        self.tokens = None
        self.name = None
        self.input_redirect_file = None
        self.output_redirect_file = None
        self.line = None

    def __repr__(self):
        return (
            f"Command(name={self.name!r}, "
            f"argv={self.argv!r}, "
            f"flags={self.flags!r}, "
            f"stdin={self.input_redirect_file!r}, "
            f"stdout={self.output_redirect_file!r})"
        )
