"""
Built-in shell commands registry.

The commands themselves live in the commands/ directory. This module loads
them and exposes the ordered name -> function table.
"""

from .commands import load_all_commands, BUILTINS as COMMANDS

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = COMMANDS


def get_builtin(command: str):
    """
    Get a built-in command by exact, case-sensitive name.

    Scans the table in registration order and returns the first match.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> get_builtin('exit') is not None
        True
        >>> get_builtin('EXIT') is None
        True
    """
    for name, func in BUILTINS.items():
        if name == command:
            return func
    return None
