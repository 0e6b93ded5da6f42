"""
Builtin command modules.

Each module registers its entry point with ``register_command``. The table is
filled once by ``load_all_commands`` and then frozen by BuiltinRegistry.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

# Registration order is the order help lists the builtins in.
COMMAND_MODULES = ('cd', 'help', 'exit_cmd')


def register_command(name: str):
    """
    Decorator that adds a command function to the builtin table.

    Example:
        @register_command('cd')
        def cmd_cd(process: Process) -> LoopStatus:
            ...
    """
    def decorator(func):
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module so its registration runs."""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f"{__name__}.{module_name}")
    return BUILTINS
