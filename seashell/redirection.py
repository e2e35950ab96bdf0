"""
Redirection directive extraction.

Recognizes three directives among a command's arguments:

    <  file    read standard input from file
    >  file    write standard output to file, truncating it
    >> file    write standard output to file, appending to it

Each directive and its filename are removed from the token sequence, so
what is left is exactly the argument vector for the program. A directive
with nothing after it is kept as an ordinary argument.
"""

import logging

from .command import Command, CommandFlags
from .exceptions import RedirectConflictError
from .tokens import END

logger = logging.getLogger(__name__)

INPUT_REDIRECT = "<"
OUTPUT_TRUNCATE = ">"
OUTPUT_APPEND = ">>"

# Directive -> (flag it sets, flag it conflicts with)
DIRECTIVES = {
    INPUT_REDIRECT: (CommandFlags.INPUT_REDIRECT, CommandFlags.NONE),
    OUTPUT_TRUNCATE: (CommandFlags.OUTPUT_TRUNCATE, CommandFlags.OUTPUT_APPEND),
    OUTPUT_APPEND: (CommandFlags.OUTPUT_APPEND, CommandFlags.OUTPUT_TRUNCATE),
}


def _take_filename(cmd: Command, index: int) -> str:
    """Remove the directive at index and the filename after it."""
    tokens = cmd.tokens
    tokens.remove(index)
    filename = tokens.get(index)
    tokens.remove(index)
    return filename


def resolve_redirections(cmd: Command):
    """
    Move redirection directives out of cmd.tokens and into cmd's flags.

    The scan index does not advance after a directive is removed, so
    directives may appear anywhere after the command name and the
    remaining arguments stay contiguous. The command name itself is never
    treated as a directive.

    Raises:
        RedirectConflictError: If both > and >> are requested. Scanning
            stops at the offending directive; the flag set first is kept.

    Examples:
        >>> from seashell.lexer import split_line
        >>> cmd = Command(line="sort < in.txt -r >> out.txt\\n")
        >>> split_line(cmd)
        >>> resolve_redirections(cmd)
        >>> cmd.argv, cmd.input_redirect_file, cmd.output_redirect_file
        (['sort', '-r'], 'in.txt', 'out.txt')
    """
    tokens = cmd.tokens
    i = 1
    while tokens.get(i) is not END:
        token = tokens.get(i)
        directive = DIRECTIVES.get(token)
        if directive is None or tokens.get(i + 1) is END:
            i += 1
            continue

        flag, conflicting = directive
        if conflicting and cmd.has_flag(conflicting):
            raise RedirectConflictError(token, line=cmd.line)

        cmd.set_flag(flag)
        filename = _take_filename(cmd, i)
        if flag is CommandFlags.INPUT_REDIRECT:
            cmd.input_redirect_file = filename
        else:
            cmd.output_redirect_file = filename
        logger.debug("redirect %s %s", token, filename)
