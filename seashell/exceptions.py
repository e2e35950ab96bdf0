"""
Exception hierarchy for seashell.

Parsing stages (read, tokenize, resolve redirections) raise these errors.
Each one carries the Status the owning loop reports for it, so the loop can
catch ShellError once and keep going.

Usage:
    from seashell.exceptions import ShellError

    try:
        resolve_redirections(cmd)
    except ShellError as e:
        return e.status
"""

from typing import Optional

from .exit_codes import Status, StatusKind


class ShellError(Exception):
    """
    Base class for all shell errors.

    Attributes:
        message: Error message
        status: Status reported to the owning loop
    """

    # Subclasses name the condition they report
    kind: Optional[StatusKind] = None

    def __init__(self, message: str, status: Optional[Status] = None):
        super().__init__(message)
        self.message = message
        if status is None:
            status = Status.named(self.kind)
        self.status = status

    def __str__(self):
        return self.message


# =============================================================================
# Input Errors
# =============================================================================

class ReadError(ShellError):
    """
    Raised when reading a line fails for a reason other than end-of-input.

    Example:
        raise ReadError("Input/output error")
    """

    kind = StatusKind.READ_FAILED

    def __init__(self, details: str):
        super().__init__(f"failed to read line: {details}")
        self.details = details


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for errors raised while turning a line into a command.

    Attributes:
        line: The input line being parsed, if known
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class TokenAllocationError(ParsingError):
    """
    Raised when the token sequence cannot grow.

    Only the current line is abandoned.
    """

    kind = StatusKind.ALLOCATION_FAILED

    def __init__(self, capacity: int, line: Optional[str] = None):
        super().__init__(f"failed to allocate memory for {capacity} tokens", line=line)
        self.capacity = capacity


class RedirectConflictError(ParsingError):
    """
    Raised when a line asks to both truncate (>) and append (>>) output.

    Example:
        raise RedirectConflictError(">>", line="echo hi > a >> b")
    """

    kind = StatusKind.REDIRECT_CONFLICT

    def __init__(self, directive: str, line: Optional[str] = None):
        message = "cannot truncate file (>) and append to file (>>)"
        super().__init__(message, line=line)
        self.directive = directive
