"""Prompt rendering"""

import os
from typing import Optional


def format_prompt(cwd: str, home: Optional[str], symbol: str = "$ ") -> str:
    """
    Render the two-line prompt: working directory, then the prompt symbol.

    A cwd inside home is shown relative to "~".

    Examples:
        >>> format_prompt('/home/ana/src', '/home/ana')
        '~/src\\n$ '
        >>> format_prompt('/home/ana', '/home/ana')
        '~\\n$ '
        >>> format_prompt('/home/anabel', '/home/ana')
        '/home/anabel\\n$ '
        >>> format_prompt('/tmp', None)
        '/tmp\\n$ '
    """
    if home:
        home = home.rstrip(os.sep) or os.sep
        if cwd == home:
            cwd = "~"
        elif cwd.startswith(home + os.sep) and home != os.sep:
            cwd = "~" + cwd[len(home):]
    return f"{cwd}\n{symbol}"
