"""
Pytest configuration and shared fixtures for seashell tests.

This module provides reusable test fixtures for:
- Building parsed Command objects from a line
- Running tests inside a scratch working directory
- Driving a Shell from scripted input
"""

import io
import os

import pytest

from seashell.command import Command
from seashell.context import ShellConfig
from seashell.lexer import split_line
from seashell.redirection import resolve_redirections
from seashell.shell import Shell


# ============================================================================
# Command Fixtures
# ============================================================================

@pytest.fixture
def tokenized():
    """Factory: Command with line read and tokenized, not yet resolved."""
    def _make(line: str) -> Command:
        cmd = Command(line=line)
        split_line(cmd)
        return cmd
    return _make


@pytest.fixture
def parsed(tokenized):
    """Factory: Command with redirections resolved, ready to dispatch."""
    def _make(line: str) -> Command:
        cmd = tokenized(line)
        resolve_redirections(cmd)
        return cmd
    return _make


# ============================================================================
# Filesystem Fixtures
# ============================================================================

@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def default_umask():
    """Pin the umask to 022 so created file modes are predictable."""
    old = os.umask(0o022)
    yield
    os.umask(old)


# ============================================================================
# Shell Fixtures
# ============================================================================

@pytest.fixture
def make_shell():
    """Factory: Shell reading the given text as its input."""
    def _make(text: str, **kwargs) -> Shell:
        kwargs.setdefault('home', None)
        kwargs.setdefault('show_cwd', False)
        config = ShellConfig(stdin=io.StringIO(text), **kwargs)
        return Shell(config)
    return _make


class FailingStream:
    """Input stream whose reads always fail."""

    def __init__(self, error: Exception):
        self.error = error

    def readline(self):
        raise self.error


@pytest.fixture
def stream_failing_with():
    """Factory: input stream raising the given error on read."""
    return FailingStream


@pytest.fixture
def failing_stream(stream_failing_with):
    return stream_failing_with(OSError(5, "Input/output error"))
