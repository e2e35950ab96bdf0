"""
Tests for redirection directive extraction.

Tests cover:
- Each directive on its own
- Several directives anywhere among the arguments
- Trailing directives left as literal arguments
- Truncate/append conflicts
"""

import pytest

from seashell.command import CommandFlags
from seashell.exceptions import RedirectConflictError
from seashell.exit_codes import StatusKind
from seashell.redirection import resolve_redirections


class TestSingleDirective:
    """One directive plus filename."""

    @pytest.mark.parametrize("directive,flag,attr", [
        ("<", CommandFlags.INPUT_REDIRECT, "input_redirect_file"),
        (">", CommandFlags.OUTPUT_TRUNCATE, "output_redirect_file"),
        (">>", CommandFlags.OUTPUT_APPEND, "output_redirect_file"),
    ])
    def test_directive_removes_two_tokens(self, tokenized, directive, flag, attr):
        """The directive and filename are removed and one flag is set."""
        cmd = tokenized(f"prog a {directive} file.txt b\n")
        before = cmd.tokens.count

        resolve_redirections(cmd)

        assert cmd.tokens.count == before - 2
        assert cmd.argv == ["prog", "a", "b"]
        assert cmd.flags == flag
        assert getattr(cmd, attr) == "file.txt"

    def test_echo_to_file(self, parsed):
        """echo hi > out.txt leaves [echo, hi] and the truncate flag."""
        cmd = parsed("echo hi > out.txt\n")
        assert cmd.argv == ["echo", "hi"]
        assert cmd.has_flag(CommandFlags.OUTPUT_TRUNCATE)
        assert not cmd.has_flag(CommandFlags.OUTPUT_APPEND)
        assert cmd.output_redirect_file == "out.txt"
        assert cmd.input_redirect_file is None

    def test_directive_directly_after_name(self, parsed):
        """A directive right after the name is honored."""
        cmd = parsed("cat < in.txt\n")
        assert cmd.argv == ["cat"]
        assert cmd.input_redirect_file == "in.txt"


class TestMultipleDirectives:
    """Several directives in one line."""

    def test_input_and_output(self, parsed):
        """Input and output redirection combine."""
        cmd = parsed("sort < in.txt -r > out.txt\n")
        assert cmd.argv == ["sort", "-r"]
        assert cmd.flags == CommandFlags.INPUT_REDIRECT | CommandFlags.OUTPUT_TRUNCATE
        assert cmd.input_redirect_file == "in.txt"
        assert cmd.output_redirect_file == "out.txt"

    def test_adjacent_directives(self, parsed):
        """Back-to-back directives are both consumed."""
        cmd = parsed("cat > out.txt < in.txt\n")
        assert cmd.argv == ["cat"]
        assert cmd.tokens.count == 1
        assert cmd.input_redirect_file == "in.txt"
        assert cmd.output_redirect_file == "out.txt"

    def test_repeated_output_last_wins(self, parsed):
        """The later of two > directives names the output file."""
        cmd = parsed("echo x > a.txt > b.txt\n")
        assert cmd.argv == ["echo", "x"]
        assert cmd.output_redirect_file == "b.txt"

    def test_remaining_tokens_are_contiguous(self, parsed):
        """No END marker appears inside the live tokens."""
        cmd = parsed("a < i b > o c\n")
        assert [cmd.tokens.get(i) for i in range(cmd.tokens.count)] == ["a", "b", "c"]
        assert cmd.tokens.get(cmd.tokens.count) is None


class TestLiteralDirectives:
    """Directives that are not honored."""

    @pytest.mark.parametrize("directive", ["<", ">", ">>"])
    def test_trailing_directive_is_literal(self, parsed, directive):
        """A directive with nothing after it stays as an argument."""
        cmd = parsed(f"echo hi {directive}\n")
        assert cmd.argv == ["echo", "hi", directive]
        assert cmd.flags == CommandFlags.NONE
        assert cmd.output_redirect_file is None
        assert cmd.input_redirect_file is None

    def test_name_is_never_a_directive(self, parsed):
        """The command name is not scanned for directives."""
        cmd = parsed("> out.txt\n")
        assert cmd.name == ">"
        assert cmd.argv == [">", "out.txt"]
        assert cmd.flags == CommandFlags.NONE

    def test_ampersand_passes_through(self, parsed):
        """& is an ordinary argument."""
        cmd = parsed("sleep 1 &\n")
        assert cmd.argv == ["sleep", "1", "&"]

    def test_no_arguments(self, parsed):
        """A bare command resolves to itself."""
        cmd = parsed("ls\n")
        assert cmd.argv == ["ls"]
        assert cmd.flags == CommandFlags.NONE


class TestConflicts:
    """Truncate and append in one line."""

    @pytest.mark.parametrize("line,first", [
        ("echo hi > a.txt >> b.txt\n", CommandFlags.OUTPUT_TRUNCATE),
        ("echo hi >> a.txt > b.txt\n", CommandFlags.OUTPUT_APPEND),
    ])
    def test_conflict_raises_and_keeps_first_flag(self, tokenized, line, first):
        """Resolution stops at the second output directive."""
        cmd = tokenized(line)
        with pytest.raises(RedirectConflictError) as exc_info:
            resolve_redirections(cmd)

        assert exc_info.value.status.kind is StatusKind.REDIRECT_CONFLICT
        assert cmd.flags == first
        assert cmd.output_redirect_file == "a.txt"

    def test_conflict_stops_scanning(self, tokenized):
        """Tokens after the conflict are left untouched."""
        cmd = tokenized("cat > a.txt >> b.txt < in.txt\n")
        with pytest.raises(RedirectConflictError):
            resolve_redirections(cmd)

        assert cmd.input_redirect_file is None
        assert cmd.argv == ["cat", ">>", "b.txt", "<", "in.txt"]

    def test_trailing_append_after_truncate_is_literal(self, parsed):
        """A trailing >> is not honored, so it cannot conflict."""
        cmd = parsed("echo hi > a.txt >>\n")
        assert cmd.argv == ["echo", "hi", ">>"]
        assert cmd.flags == CommandFlags.OUTPUT_TRUNCATE
