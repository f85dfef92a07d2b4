"""Line readers used by the REPL.

A reader turns a prompt into one line of input, or None at end of input.
"""

from typing import Iterable, Iterator, Optional, Protocol


class LineReader(Protocol):
    """Anything that can read one line after showing a prompt"""

    def read_line(self, prompt: str) -> Optional[str]:
        ...


class ConsoleLineReader:
    """Reads from standard input with readline editing when available"""

    def __init__(self):
        try:
            # Importing readline is enough to enable line editing for input()
            import readline  # noqa: F401
        except ImportError:
            pass

    def read_line(self, prompt: str) -> Optional[str]:
        """
        Show the prompt and read one line

        Returns:
            The line without its trailing newline, or None on end of input
        """
        try:
            return input(prompt)
        except EOFError:
            return None


class ScriptedLineReader:
    """
    Serves lines from a sequence instead of a terminal

    Example:
        >>> reader = ScriptedLineReader(['echo hi'])
        >>> reader.read_line('$ ')
        'echo hi'
        >>> reader.read_line('$ ') is None
        True
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.prompts = []

    def read_line(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return next(self._lines, None)
