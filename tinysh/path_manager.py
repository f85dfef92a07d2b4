"""Executable lookup and working directory management for tinysh.

This module provides the PathManager class which handles:
- PATH search for external programs (shared by `type` and the executor)
- Current working directory access and changes
- HOME lookup for `cd`
"""

import os
from typing import List, Mapping, Optional


def is_executable(path: str) -> bool:
    """Return True if path is a regular file the current user may execute."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


class PathManager:
    """Resolves program names and owns the shell's view of the cwd.

    The working directory is process-wide state; this class reads and
    changes it through the os module so that spawned children inherit it.

    Attributes:
        env: Read-only mapping of environment variables (PATH, HOME)
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        """Initialize the path manager.

        Args:
            env: Environment mapping (default: os.environ)
        """
        self.env = os.environ if env is None else env

    def search_directories(self) -> List[str]:
        """Return the directories listed in PATH, in order.

        Empty entries mean the current directory, as in POSIX shells.
        An unset PATH yields no directories at all.

        Examples:
            PATH='/usr/bin:/bin'  -> ['/usr/bin', '/bin']
            PATH='/usr/bin::/bin' -> ['/usr/bin', '.', '/bin']
        """
        path = self.env.get("PATH")
        if path is None:
            return []
        return [entry or "." for entry in path.split(os.pathsep)]

    def find_executable(self, name: str) -> Optional[str]:
        """Resolve a program name to the file that would be executed.

        Names containing a slash are not searched; they resolve to
        themselves (relative to the cwd) if executable. Otherwise the
        first PATH directory holding an executable regular file wins.

        Args:
            name: Program name as typed (argv[0])

        Returns:
            Path to the executable, or None if not found
        """
        if not name:
            return None

        if "/" in name:
            return name if is_executable(name) else None

        for directory in self.search_directories():
            candidate = os.path.join(directory, name)
            if is_executable(candidate):
                return candidate
        return None

    def home_directory(self) -> Optional[str]:
        """Return $HOME, or None when it is unset or empty."""
        return self.env.get("HOME") or None

    def change_directory(self, path: str) -> None:
        """Change the current working directory.

        Args:
            path: New directory path (relative paths resolve against the cwd)

        Raises:
            OSError: If the directory does not exist or cannot be entered
        """
        os.chdir(path)

    def get_cwd(self) -> str:
        """Get the absolute current working directory.

        Raises:
            OSError: If the cwd has been removed or is unreadable
        """
        return os.getcwd()
