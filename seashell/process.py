"""Process class for running external programs"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from .command import Command, CommandFlags
from .exit_codes import (
    CMD_EXEC_ERR,
    CMD_INPREDIR_ERR,
    CMD_OUTREDIR_ERR,
    Status,
    StatusKind,
)

logger = logging.getLogger(__name__)

# rw-r--r--
OUTPUT_FILE_MODE = 0o644

TRUNCATE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
APPEND_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND

_CHILD_FAILURE_CODES = {
    StatusKind.INPUT_REDIRECT_FAILED: CMD_INPREDIR_ERR,
    StatusKind.OUTPUT_REDIRECT_FAILED: CMD_OUTREDIR_ERR,
    StatusKind.EXEC_FAILED: CMD_EXEC_ERR,
}


@dataclass(frozen=True)
class RedirectSpec:
    """
    Stream redirections applied in the child before the program starts.

    Attributes:
        stdin_file: File to open read-only as standard input
        stdout_file: File to open write-only as standard output
        append: Append to stdout_file instead of truncating it
    """

    stdin_file: Optional[str] = None
    stdout_file: Optional[str] = None
    append: bool = False

    @classmethod
    def from_command(cls, cmd: Command) -> 'RedirectSpec':
        stdin_file = None
        stdout_file = None
        if cmd.has_flag(CommandFlags.INPUT_REDIRECT):
            stdin_file = cmd.input_redirect_file
        if cmd.has_flag(CommandFlags.OUTPUT_TRUNCATE | CommandFlags.OUTPUT_APPEND):
            stdout_file = cmd.output_redirect_file
        return cls(
            stdin_file=stdin_file,
            stdout_file=stdout_file,
            append=cmd.has_flag(CommandFlags.OUTPUT_APPEND),
        )

    @property
    def stdout_flags(self) -> int:
        return APPEND_FLAGS if self.append else TRUNCATE_FLAGS


class Process:
    """Represents a single external program run in a child process"""

    def __init__(
        self,
        command: str,
        args: List[str],
        redirects: Optional[RedirectSpec] = None,
    ):
        """
        Initialize a process

        Args:
            command: Program name, looked up on PATH
            args: Full argument vector, args[0] is the program name
            redirects: Stream redirections for the child
        """
        self.command = command
        self.args = args
        self.redirects = redirects or RedirectSpec()
        self.pid: Optional[int] = None
        self.status: Optional[Status] = None

    @classmethod
    def from_command(cls, cmd: Command) -> 'Process':
        return cls(cmd.name, cmd.argv, RedirectSpec.from_command(cmd))

    def execute(self) -> Status:
        """
        Run the program and wait for it to finish

        The child either has its streams redirected before the program
        image loads, or exits with a redirect/exec failure code without
        running the program. The failure is also written to a close-on-exec
        pipe, which stays empty when exec succeeds, so the parent can tell
        a setup failure from a program that exits with the same code.

        Returns:
            SUCCESS, CHILD_EXIT with the program's exit code, or one of
            INPUT_REDIRECT_FAILED, OUTPUT_REDIRECT_FAILED, EXEC_FAILED,
            NONSTANDARD_EXIT, or SPAWN_FAILED when no child could be created
        """
        # Pending output would otherwise be written twice
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            err_read, err_write = os.pipe()
        except OSError as e:
            logger.warning("cannot create pipe for %r: %s", self, e)
            return self._spawn_failed()
        try:
            pid = os.fork()
        except OSError as e:
            os.close(err_read)
            os.close(err_write)
            logger.warning("cannot fork %r: %s", self, e)
            return self._spawn_failed()
        if pid == 0:
            os.close(err_read)
            self._run_child(err_write)

        self.pid = pid
        os.close(err_write)
        logger.debug("spawned %r as pid %d", self, pid)
        try:
            failure = self._read_failure(err_read)
        finally:
            os.close(err_read)
            _, wait_status = os.waitpid(pid, 0)

        self.status = self._translate(wait_status, failure)
        logger.debug("pid %d finished: %s", pid, self.status)
        return self.status

    def _spawn_failed(self) -> Status:
        self.status = Status.named(StatusKind.SPAWN_FAILED)
        return self.status

    def _run_child(self, err_write: int):
        """Child side: redirect, exec, never return."""
        try:
            redirects = self.redirects
            if redirects.stdin_file is not None:
                try:
                    fd_in = os.open(redirects.stdin_file, os.O_RDONLY)
                except (OSError, ValueError):
                    self._child_fail(err_write, StatusKind.INPUT_REDIRECT_FAILED)
                if fd_in != 0:
                    os.dup2(fd_in, 0)
                    os.close(fd_in)

            if redirects.stdout_file is not None:
                try:
                    fd_out = os.open(redirects.stdout_file, redirects.stdout_flags,
                                     OUTPUT_FILE_MODE)
                except (OSError, ValueError):
                    self._child_fail(err_write, StatusKind.OUTPUT_REDIRECT_FAILED)
                if fd_out != 1:
                    os.dup2(fd_out, 1)
                    os.close(fd_out)

            try:
                os.execvp(self.command, self.args)
            except (OSError, ValueError):
                self._child_fail(err_write, StatusKind.EXEC_FAILED)
        finally:
            os._exit(CMD_EXEC_ERR)

    @staticmethod
    def _child_fail(err_write: int, kind: StatusKind):
        try:
            os.write(err_write, kind.value.encode('ascii'))
        finally:
            os._exit(_CHILD_FAILURE_CODES[kind])

    @staticmethod
    def _read_failure(err_read: int) -> Optional[StatusKind]:
        chunks = []
        while True:
            chunk = os.read(err_read, 64)
            if not chunk:
                break
            chunks.append(chunk)
        if not chunks:
            return None
        return StatusKind(b''.join(chunks).decode('ascii'))

    @staticmethod
    def _translate(wait_status: int, failure: Optional[StatusKind]) -> Status:
        if failure is not None:
            return Status.named(failure)
        if os.WIFEXITED(wait_status):
            return Status.from_child(os.WEXITSTATUS(wait_status))
        return Status.named(StatusKind.NONSTANDARD_EXIT)

    def __repr__(self):
        args_str = ' '.join(self.args[1:]) if self.args else ''
        return f"Process({self.command} {args_str})"
