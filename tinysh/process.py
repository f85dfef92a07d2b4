"""Process class for builtin command execution"""

import sys
from typing import Callable, List, Optional, TextIO

from loguru import logger

from .context import CommandContext
from .exceptions import ShellError, ShellExit


class Process:
    """Represents one in-process invocation of a builtin"""

    def __init__(
        self,
        command: str,
        args: List[str],
        executor: Callable[['Process'], int],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name (argv[0])
            args: Command arguments (argv[1:])
            executor: Builtin handler that executes the command
            stdout: Output stream (default: sys.stdout at execution time)
            stderr: Error stream (default: sys.stderr at execution time)
            context: CommandContext with environment, registry and PATH access
        """
        self.command = command
        self.args = args
        self.executor = executor
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    @property
    def env(self):
        """Environment variables from the context."""
        return self.context.env

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except ShellExit:
            raise
        except ShellError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            logger.opt(exception=e).debug("builtin {} failed", self.command)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
