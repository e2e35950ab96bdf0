"""
Status codes returned by every stage of command execution.

A Status is a tagged value: the kind says what happened, the code carries
the numeric detail. Exit codes of external programs live under
StatusKind.CHILD_EXIT, so they can never be confused with the shell's own
named conditions even when the numbers overlap.

Usage:
    from seashell.exit_codes import Status, StatusKind, SUCCESS

    status = Status.from_child(3)
    if status.kind is StatusKind.CHILD_EXIT:
        print(status.code)
"""

from dataclasses import dataclass
from enum import Enum


class StatusKind(Enum):
    """What a status describes."""

    OK = "ok"
    EXIT = "exit"
    CHILD_EXIT = "child_exit"
    NONSTANDARD_EXIT = "nonstandard_exit"
    EXEC_FAILED = "exec_failed"
    SPAWN_FAILED = "spawn_failed"
    INPUT_REDIRECT_FAILED = "input_redirect_failed"
    OUTPUT_REDIRECT_FAILED = "output_redirect_failed"
    REDIRECT_CONFLICT = "redirect_conflict"
    CHDIR_FAILED = "chdir_failed"
    ALLOCATION_FAILED = "allocation_failed"
    READ_FAILED = "read_failed"


# Numeric codes for the named conditions. The child process exits with
# the redirect/exec codes when it fails before running the target program.
CMD_EXIT = 99
CMD_NONSTD_EXIT = 101
CMD_EXEC_ERR = 102
CMD_INPREDIR_ERR = 103
CMD_OUTREDIR_ERR = 104
CMD_TRUNC_APPEND_ERR = 105
CMD_CHDIR_ERR = 200
CMD_INTERNAL_ERR = -1

NAMED_CODES = {
    StatusKind.OK: 0,
    StatusKind.EXIT: CMD_EXIT,
    StatusKind.NONSTANDARD_EXIT: CMD_NONSTD_EXIT,
    StatusKind.EXEC_FAILED: CMD_EXEC_ERR,
    StatusKind.SPAWN_FAILED: CMD_INTERNAL_ERR,
    StatusKind.INPUT_REDIRECT_FAILED: CMD_INPREDIR_ERR,
    StatusKind.OUTPUT_REDIRECT_FAILED: CMD_OUTREDIR_ERR,
    StatusKind.REDIRECT_CONFLICT: CMD_TRUNC_APPEND_ERR,
    StatusKind.CHDIR_FAILED: CMD_CHDIR_ERR,
    StatusKind.ALLOCATION_FAILED: CMD_INTERNAL_ERR,
    StatusKind.READ_FAILED: CMD_INTERNAL_ERR,
}


@dataclass(frozen=True)
class Status:
    """
    Outcome of reading, parsing or executing one command line.

    Attributes:
        kind: The condition this status describes
        code: Child exit code for CHILD_EXIT, the named code otherwise
    """

    kind: StatusKind
    code: int = 0

    @classmethod
    def named(cls, kind: StatusKind) -> 'Status':
        """Build the status for a named condition with its standard code."""
        if kind is StatusKind.CHILD_EXIT:
            raise ValueError("CHILD_EXIT needs an explicit exit code")
        return cls(kind, NAMED_CODES[kind])

    @classmethod
    def from_child(cls, exit_code: int) -> 'Status':
        """
        Wrap the exit code of a normally terminated child.

        Zero collapses to SUCCESS; anything else is kept verbatim.

        Examples:
            >>> Status.from_child(0) == SUCCESS
            True
            >>> Status.from_child(2)
            Status(kind=<StatusKind.CHILD_EXIT: 'child_exit'>, code=2)
        """
        if exit_code == 0:
            return SUCCESS
        return cls(StatusKind.CHILD_EXIT, exit_code)

    @property
    def ok(self) -> bool:
        return self.kind is StatusKind.OK

    @property
    def is_exit(self) -> bool:
        return self.kind is StatusKind.EXIT

    def __bool__(self):
        # Truthy means "something needs attention", like a non-zero C status
        return not self.ok


SUCCESS = Status(StatusKind.OK, 0)
EXIT_REQUESTED = Status(StatusKind.EXIT, CMD_EXIT)
