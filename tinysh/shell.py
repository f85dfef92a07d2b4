"""Read-eval-print loop for tinysh"""

import os
import sys
from typing import List, Mapping, Optional, TextIO

from loguru import logger
from rich.console import Console
from rich.text import Text

from .commands import BuiltinRegistry, create_default_registry
from .config import ShellConfig
from .context import CommandContext
from .exceptions import ParsingError, ShellExit
from .executor import ProcessExecutor
from .lexer import ShellLexer
from .path_manager import PathManager
from .process import Process
from .reader import ConsoleLineReader, LineReader


class Shell:
    """Interactive shell: prompt, read, lex, dispatch, repeat"""

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        registry: Optional[BuiltinRegistry] = None,
        reader: Optional[LineReader] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the shell

        Args:
            config: Prompt and lexer limits (default: ShellConfig())
            registry: Builtin table (default: the standard builtins)
            reader: Source of input lines (default: the terminal)
            stdout: Stream for builtin output (default: sys.stdout)
            stderr: Stream for diagnostics (default: sys.stderr)
            env: Environment for PATH/HOME lookup and children (default: os.environ)
        """
        self.config = config if config is not None else ShellConfig()
        self.builtins = registry if registry is not None else create_default_registry()
        self.reader = reader if reader is not None else ConsoleLineReader()
        self._stdout = stdout
        self._stderr = stderr
        self.env = os.environ if env is None else env

        self.path_manager = PathManager(self.env)
        self.context = CommandContext(
            env=self.env,
            builtins=self.builtins,
            config=self.config,
            path_manager=self.path_manager,
        )
        # Children inherit the real environment unless a custom one was given
        self.executor = ProcessExecutor(self.path_manager, env=env)

        # Diagnostics are printed verbatim: no markup, emoji or highlighting
        self.console = Console(
            file=stderr,
            stderr=stderr is None,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

        self.last_exit_code = 0

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def report_error(self, message: str) -> None:
        """Print a diagnostic to stderr (red on terminals)"""
        self.console.print(Text(message, style="red"))

    def parse(self, command_line: str) -> List[str]:
        """
        Split a command line into arguments using the configured limits

        Raises:
            ParsingError: On unmatched quotes, a trailing backslash or
                exceeded limits
        """
        return ShellLexer.from_config(command_line, self.config).tokenize()

    def dispatch(self, argv: List[str]) -> int:
        """
        Run an argument vector: builtins first, then PATH

        Args:
            argv: Non-empty, fully unescaped argument vector

        Returns:
            Exit status of the command
        """
        handler = self.builtins.resolve(argv[0])

        if handler is not None:
            logger.debug("builtin {} {}", argv[0], argv[1:])
            process = Process(
                command=argv[0],
                args=argv[1:],
                stdout=self.stdout,
                stderr=self.stderr,
                executor=handler,
                context=self.context,
            )
            return process.execute()

        logger.debug("external {}", argv)
        return self.executor.execute(argv, stdout=self.stdout, stderr=self.stderr)

    def execute(self, command_line: str) -> int:
        """
        Execute one command line

        Args:
            command_line: Raw line, without its trailing newline

        Returns:
            Exit code of the command (2 on a parse error, 0 for a blank line)

        Raises:
            ShellExit: If the line ran the exit builtin
        """
        try:
            argv = self.parse(command_line)
        except ParsingError as e:
            logger.debug("parse error in {!r}: {}", command_line, e)
            self.report_error(str(e))
            self.last_exit_code = e.exit_code
            return e.exit_code

        if not argv:
            return 0

        self.last_exit_code = self.dispatch(argv)
        return self.last_exit_code

    def repl(self) -> int:
        """
        Run the interactive loop until `exit` or end of input

        Returns:
            The status given to `exit`, or 0 at end of input
        """
        while True:
            try:
                line = self.reader.read_line(self.config.prompt)
            except KeyboardInterrupt:
                # Ctrl+C at the prompt - start a new line
                self.stdout.write('\n')
                self.stdout.flush()
                continue

            if line is None:
                logger.debug("end of input")
                return 0

            try:
                self.execute(line.rstrip('\n'))
            except ShellExit as e:
                logger.debug("exit {}", e.code)
                return e.code
            except KeyboardInterrupt:
                # Ctrl+C during a builtin - interrupt it
                self.stdout.write('\n')
                self.stdout.flush()
            except Exception as e:
                logger.opt(exception=e).debug("command failed: {!r}", line)
                self.report_error(f"Error: {e}")
