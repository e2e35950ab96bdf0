"""
Tests for ShellConfig and prompt rendering.
"""

import io

from seashell.context import DEFAULT_PROMPT, ShellConfig
from seashell.prompt import format_prompt


class TestShellConfig:
    """Test ShellConfig construction."""

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/ana")
        config = ShellConfig()
        assert config.prompt_symbol == DEFAULT_PROMPT
        assert config.home == "/home/ana"
        assert config.show_cwd is True

    def test_from_env(self):
        config = ShellConfig.from_env({"HOME": "/h", "SEASHELL_PROMPT": "% "})
        assert config.home == "/h"
        assert config.prompt_symbol == "% "

    def test_overrides_win(self):
        stream = io.StringIO()
        config = ShellConfig.from_env(
            {"SEASHELL_PROMPT": "% "}, prompt_symbol="> ", stdin=stream, show_cwd=False
        )
        assert config.prompt_symbol == "> "
        assert config.stdin is stream
        assert config.show_cwd is False

    def test_none_overrides_ignored(self):
        config = ShellConfig.from_env({"SEASHELL_PROMPT": "% "}, prompt_symbol=None)
        assert config.prompt_symbol == "% "

    def test_repr(self):
        assert "prompt_symbol='$ '" in repr(ShellConfig(home=None))


class TestFormatPrompt:
    """Test format_prompt()."""

    def test_home_prefix(self):
        assert format_prompt("/home/ana/src", "/home/ana") == "~/src\n$ "

    def test_home_itself(self):
        assert format_prompt("/home/ana", "/home/ana/") == "~\n$ "

    def test_outside_home(self):
        assert format_prompt("/var/log", "/home/ana") == "/var/log\n$ "

    def test_sibling_with_shared_prefix(self):
        """/home/anabel is not inside /home/ana."""
        assert format_prompt("/home/anabel", "/home/ana") == "/home/anabel\n$ "

    def test_no_home(self):
        assert format_prompt("/tmp", None) == "/tmp\n$ "
        assert format_prompt("/tmp", "") == "/tmp\n$ "

    def test_custom_symbol(self):
        assert format_prompt("/tmp", None, "% ") == "/tmp\n% "
