"""Builtin command registry for tinysh.

This module provides the BuiltinRegistry class which handles:
- Mapping builtin names to their handlers
- Answering `type` queries about builtins
- Keeping the table immutable for the lifetime of the shell
"""

from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from ..process import Process
from .cd import cmd_cd
from .echo import cmd_echo
from .exit_cmd import cmd_exit
from .pwd import cmd_pwd
from .type_cmd import cmd_type

BuiltinHandler = Callable[[Process], int]

DEFAULT_BUILTINS: Mapping[str, BuiltinHandler] = MappingProxyType({
    'exit': cmd_exit,
    'cd': cmd_cd,
    'pwd': cmd_pwd,
    'echo': cmd_echo,
    'type': cmd_type,
})


class BuiltinRegistry:
    """Immutable registry of builtin commands.

    The table is copied at construction and never changes afterwards, so
    one registry can be shared by dispatch and by the `type` builtin.

    Example:
        >>> registry = create_default_registry()
        >>> registry.is_builtin('cd')
        True
        >>> registry.resolve('ls') is None
        True

    Attributes:
        _handlers: Read-only mapping of names to handlers
    """

    def __init__(self, handlers: Mapping[str, BuiltinHandler]):
        """Initialize the registry.

        Args:
            handlers: Mapping of builtin names to handler callables
        """
        self._handlers: Mapping[str, BuiltinHandler] = MappingProxyType(dict(handlers))

    def resolve(self, name: str) -> Optional[BuiltinHandler]:
        """Get a builtin handler by name.

        Args:
            name: Command name (argv[0])

        Returns:
            The handler if name is a builtin, None otherwise
        """
        return self._handlers.get(name)

    def is_builtin(self, name: str) -> bool:
        """Check if name is a builtin.

        Args:
            name: Command name to check

        Returns:
            True if name is a builtin, False otherwise
        """
        return name in self._handlers

    def names(self) -> List[str]:
        """Get all builtin names, sorted."""
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return self.is_builtin(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"BuiltinRegistry({', '.join(self.names())})"


def create_default_registry(extra: Optional[Dict[str, BuiltinHandler]] = None) -> BuiltinRegistry:
    """Build the registry of standard builtins.

    Args:
        extra: Additional handlers, mainly for tests; these win on name clashes

    Returns:
        A new BuiltinRegistry
    """
    handlers = dict(DEFAULT_BUILTINS)
    if extra:
        handlers.update(extra)
    return BuiltinRegistry(handlers)


__all__ = [
    'BuiltinHandler',
    'BuiltinRegistry',
    'DEFAULT_BUILTINS',
    'create_default_registry',
]
