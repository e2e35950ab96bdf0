"""
Builtin command registry.

Each module in this package registers its command with @register_command.
BUILTINS keeps registration order, which is the order the dispatcher scans
and the order `help` lists them in.
"""

import importlib
from typing import Callable, Dict

from ..command import Command
from ..exit_codes import Status

BuiltinFunc = Callable[[Command], Status]

BUILTINS: Dict[str, BuiltinFunc] = {}

# Table order
COMMAND_MODULES = ('cd', 'help_cmd', 'exit_cmd', 'seashell_cmd')


def register_command(name: str):
    """
    Register a function as the builtin called name.

    Example:
        @register_command('exit')
        def cmd_exit(cmd: Command) -> Status:
            return EXIT_REQUESTED
    """
    def decorator(func: BuiltinFunc) -> BuiltinFunc:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so the registry is populated in order."""
    for module in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module}')

    # A module imported directly beforehand may have registered early
    rank = {f'{__name__}.{module}': i for i, module in enumerate(COMMAND_MODULES)}
    ordered = sorted(BUILTINS.items(), key=lambda item: rank.get(item[1].__module__, len(rank)))
    BUILTINS.clear()
    BUILTINS.update(ordered)
