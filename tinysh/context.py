"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples builtins
from the Shell class, making them testable without a running REPL.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, TYPE_CHECKING
import os

from .config import ShellConfig
from .path_manager import PathManager

if TYPE_CHECKING:
    from .commands import BuiltinRegistry


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides builtins with access to:
    - Environment variables (read-only)
    - The builtin registry (for `type`)
    - PATH search and working directory access

    Example:
        >>> from tinysh.context import CommandContext
        >>> ctx = CommandContext(env={'HOME': '/home/alice'})
        >>> ctx.get_variable('HOME')
        '/home/alice'
    """

    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    builtins: Optional['BuiltinRegistry'] = None
    config: ShellConfig = field(default_factory=ShellConfig)
    path_manager: Optional[PathManager] = None

    def __post_init__(self):
        if self.path_manager is None:
            self.path_manager = PathManager(self.env)

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if not set
        """
        return self.env.get(name)

    def is_builtin(self, name: str) -> bool:
        """Check whether name is a builtin of the current registry."""
        return self.builtins is not None and self.builtins.is_builtin(name)

    def find_executable(self, name: str) -> Optional[str]:
        """Resolve name on PATH (same search the executor uses)."""
        return self.path_manager.find_executable(name)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(env_vars={len(self.env)}, "
            f"builtins={len(self.builtins) if self.builtins is not None else 0}, "
            f"config={self.config!r})"
        )
