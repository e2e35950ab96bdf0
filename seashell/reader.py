"""Reading one command line from an input stream"""

from typing import TextIO

from .command import Command
from .exceptions import ReadError
from .exit_codes import EXIT_REQUESTED, SUCCESS, Status


def read_line(cmd: Command, stream: TextIO) -> Status:
    """
    Read one line from stream into cmd.line.

    The newline, if any, is kept. A final line without a newline is still
    returned; the read after it hits end-of-input.

    Returns:
        SUCCESS, or EXIT_REQUESTED at end-of-input with nothing read

    Raises:
        ReadError: If the stream fails or the input cannot be decoded
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise ReadError(str(e)) from e

    if line == '':
        return EXIT_REQUESTED
    cmd.line = line
    return SUCCESS
