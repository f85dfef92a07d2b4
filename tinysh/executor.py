"""External program execution for tinysh.

ProcessExecutor resolves argv[0] with the shared PathManager search, starts
the program as a child process and blocks until it exits. The child
inherits the shell's environment, working directory and standard streams.
"""

import subprocess
import sys
from typing import List, Mapping, Optional, TextIO

from loguru import logger

from .exceptions import CommandNotFoundError, SpawnError
from .path_manager import PathManager

SIGNAL_EXIT_BASE = 128


def normalize_returncode(returncode: int) -> int:
    """Map a Popen return code to a shell status in [0, 255].

    A child killed by signal N reports -N; shells report 128 + N.
    """
    if returncode < 0:
        return SIGNAL_EXIT_BASE + (-returncode)
    return returncode & 0xFF


class ProcessExecutor:
    """Runs external programs found on PATH"""

    def __init__(self, path_manager: Optional[PathManager] = None,
                 env: Optional[Mapping[str, str]] = None):
        """
        Initialize the executor

        Args:
            path_manager: PATH search to use (shared with the `type` builtin)
            env: Environment passed to children (default: inherit the shell's)
        """
        self.path_manager = path_manager if path_manager is not None else PathManager(env)
        self.env = env

    def resolve(self, name: str) -> str:
        """
        Resolve a program name to an executable path

        Raises:
            CommandNotFoundError: If no executable matches
        """
        path = self.path_manager.find_executable(name)
        if path is None:
            raise CommandNotFoundError(name)
        return path

    def spawn(self, argv: List[str], executable: str) -> int:
        """
        Start the program and wait for it to finish

        argv[0] is passed through unchanged; the resolved path is only used
        to locate the program image.

        Returns:
            Child's exit status

        Raises:
            SpawnError: If the OS could not start the child
        """
        # Keep anything the shell already printed ahead of the child's output
        sys.stdout.flush()
        sys.stderr.flush()

        env = dict(self.env) if self.env is not None else None
        try:
            child = subprocess.Popen(argv, executable=executable, env=env)
        except OSError as e:
            logger.opt(exception=e).debug("spawn of {} failed", executable)
            raise SpawnError(argv[0], e.strerror or str(e)) from e

        logger.debug("started pid {} for {}", child.pid, executable)
        try:
            returncode = child.wait()
        except KeyboardInterrupt:
            # The child got the same SIGINT; reap it before reprompting
            returncode = child.wait()
        return normalize_returncode(returncode)

    def execute(self, argv: List[str], stdout: Optional[TextIO] = None,
                stderr: Optional[TextIO] = None) -> int:
        """
        Resolve and run a command line

        Args:
            argv: Argument vector; argv[0] is the program name as typed
            stdout: Stream for the "command not found" message (default: sys.stdout)
            stderr: Stream for spawn failures (default: sys.stderr)

        Returns:
            Exit status: the child's status, 127 if not found, 126 if the
            child could not be started
        """
        stdout = stdout if stdout is not None else sys.stdout
        stderr = stderr if stderr is not None else sys.stderr

        try:
            executable = self.resolve(argv[0])
        except CommandNotFoundError as e:
            stdout.write(f"{e}\n")
            stdout.flush()
            return e.exit_code

        try:
            exit_code = self.spawn(argv, executable)
        except SpawnError as e:
            stderr.write(f"{e}\n")
            stderr.flush()
            return e.exit_code

        logger.debug("{} exited with status {}", argv[0], exit_code)
        return exit_code
