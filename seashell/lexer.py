"""
Line tokenizer.

Splits a command line on whitespace. There is no quoting, escaping or
expansion: every run of characters other than space, tab and newline is
one token.
"""

import logging
import re

from .command import Command
from .tokens import Span, TokenSequence

logger = logging.getLogger(__name__)

TOKEN_DELIMITERS = " \t\n"

_TOKEN_RE = re.compile(f"[^{re.escape(TOKEN_DELIMITERS)}]+")


def iter_spans(line: str):
    """Yield the Span of every token in line, left to right."""
    for match in _TOKEN_RE.finditer(line):
        yield Span(match.start(), match.end())


def tokenize(line: str) -> TokenSequence:
    """
    Build the token sequence for a line.

    Raises:
        TokenAllocationError: If the sequence cannot grow

    Examples:
        >>> tokenize("ls  -l\\t/tmp\\n").to_list()
        ['ls', '-l', '/tmp']
        >>> len(tokenize("   \\n"))
        0
    """
    tokens = TokenSequence(line)
    for span in iter_spans(line):
        tokens.append(span)
    return tokens


def split_line(cmd: Command):
    """
    Tokenize cmd.line into cmd.tokens and set cmd.name.

    A blank line leaves cmd.name as None.
    """
    cmd.tokens = tokenize(cmd.line)
    cmd.name = cmd.tokens.get(0)
    logger.debug("tokens: %r", cmd.tokens)
