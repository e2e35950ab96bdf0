"""
ShellConfig - settings for one interactive shell session.

The shell loop reads everything it needs from here instead of reaching for
globals, which keeps it easy to drive from tests.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO
import os
import sys

DEFAULT_PROMPT = "$ "


@dataclass
class ShellConfig:
    """
    Settings for a shell session.

    Attributes:
        stdin: Stream command lines are read from
        prompt_symbol: Text printed after the working directory line
        home: Directory shown as "~" in the prompt
        show_cwd: Print the working directory line above the prompt

    Example:
        >>> import io
        >>> config = ShellConfig(stdin=io.StringIO("exit\\n"), home='/home/ana')
        >>> config.prompt_symbol
        '$ '
    """

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    prompt_symbol: str = DEFAULT_PROMPT
    home: Optional[str] = field(default_factory=lambda: os.environ.get('HOME'))
    show_cwd: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> 'ShellConfig':
        """
        Build a config from environment variables.

        Reads HOME and SEASHELL_PROMPT. Keyword overrides win over the
        environment; None overrides are ignored.

        Example:
            >>> ShellConfig.from_env({'SEASHELL_PROMPT': '> '}).prompt_symbol
            '> '
        """
        if env is None:
            env = os.environ
        values = {
            'home': env.get('HOME'),
            'prompt_symbol': env.get('SEASHELL_PROMPT', DEFAULT_PROMPT),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self):
        return (
            f"ShellConfig(prompt_symbol={self.prompt_symbol!r}, "
            f"home={self.home!r}, "
            f"show_cwd={self.show_cwd!r})"
        )
