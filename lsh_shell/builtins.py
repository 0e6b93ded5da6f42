"""
Built-in shell commands registry.

The command modules in commands/ fill a table as they are imported.
BuiltinRegistry takes a read-only view of that table; dispatch is a pure
lookup and nothing can add or replace a builtin once the loop starts.
"""

from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple

from .commands import load_all_commands
from .exit_codes import LoopStatus
from .process import Process

Operation = Callable[[Process], LoopStatus]


class BuiltinRegistry:
    """Immutable mapping from builtin name to operation.

    Attributes:
        _operations: Read-only view over the name-to-operation table
    """

    def __init__(self, operations: Mapping[str, Operation]):
        self._operations: Mapping[str, Operation] = MappingProxyType(dict(operations))

    def lookup(self, name: Optional[str]) -> Optional[Operation]:
        """
        Get a built-in command executor.

        Args:
            name: The command name to look up

        Returns:
            The command function, or None if not found

        Example:
            >>> registry = default_registry()
            >>> executor = registry.lookup('cd')
            >>> if executor:
            ...     executor(process)
        """
        if name is None:
            return None
        return self._operations.get(name)

    def names(self) -> Tuple[str, ...]:
        """Builtin names in registration order."""
        return tuple(self._operations)

    @property
    def operations(self) -> Mapping[str, Operation]:
        return self._operations

    def __contains__(self, name) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __repr__(self):
        return f"BuiltinRegistry({', '.join(self._operations)})"


def default_registry() -> BuiltinRegistry:
    """Load every command module and freeze the result."""
    table: Dict[str, Operation] = load_all_commands()
    return BuiltinRegistry(table)
