"""
Argument lexer for tinysh.

Turns one raw input line into the list of fully unescaped arguments that
dispatch consumes. Quoting follows POSIX shell rules:

- Unquoted spaces separate arguments (runs collapse, no empty arguments)
- Single quotes preserve everything literally, backslash included
- Double quotes preserve everything except \\", \\\\, \\$ and \\`
- An unquoted backslash escapes any following character
- Quotes do not end a word: a'b c'd is the single argument "ab cd"

The lexer is a five-state machine. transition() is the pure per-character
table; ShellLexer drives it over a line and enforces the size limits.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .config import DEFAULT_MAX_ARG_LENGTH, DEFAULT_MAX_ARGS, ShellConfig
from .exceptions import (
    ArgumentTooLongError,
    TooManyArgumentsError,
    TrailingBackslashError,
    UnmatchedQuoteError,
)

SEPARATOR = ' '
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = '\\'

# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPABLE = frozenset('"\\$`')


class LexerState(Enum):
    """Lexer states; exactly one is active at each input position."""

    DEFAULT = "default"
    IN_SINGLE_QUOTE = "in_single_quote"
    IN_DOUBLE_QUOTE = "in_double_quote"
    ESCAPE_IN_DEFAULT = "escape_in_default"
    ESCAPE_IN_DOUBLE_QUOTE = "escape_in_double_quote"


@dataclass(frozen=True)
class Transition:
    """
    Result of feeding one character to the lexer.

    Attributes:
        state: State after the character
        emit: Text appended to the current argument (may be empty)
        boundary: True if the character ends the current argument
        starts_token: True if the character begins an argument even when
            it emits nothing (an opening quote or an escape)
    """

    state: LexerState
    emit: str = ''
    boundary: bool = False
    starts_token: bool = False


def transition(state: LexerState, char: str) -> Transition:
    """
    Compute the next state for one input character.

    Args:
        state: Current lexer state
        char: A single character of input

    Returns:
        Transition describing the new state and any emitted text

    Examples:
        >>> transition(LexerState.DEFAULT, "'")
        Transition(state=<LexerState.IN_SINGLE_QUOTE: 'in_single_quote'>, emit='', boundary=False, starts_token=True)
        >>> transition(LexerState.ESCAPE_IN_DOUBLE_QUOTE, 'q').emit
        '\\\\q'
    """
    if state is LexerState.DEFAULT:
        if char == SEPARATOR:
            return Transition(LexerState.DEFAULT, boundary=True)
        if char == SINGLE_QUOTE:
            return Transition(LexerState.IN_SINGLE_QUOTE, starts_token=True)
        if char == DOUBLE_QUOTE:
            return Transition(LexerState.IN_DOUBLE_QUOTE, starts_token=True)
        if char == BACKSLASH:
            return Transition(LexerState.ESCAPE_IN_DEFAULT, starts_token=True)
        return Transition(LexerState.DEFAULT, emit=char)

    if state is LexerState.IN_SINGLE_QUOTE:
        if char == SINGLE_QUOTE:
            return Transition(LexerState.DEFAULT)
        return Transition(LexerState.IN_SINGLE_QUOTE, emit=char)

    if state is LexerState.IN_DOUBLE_QUOTE:
        if char == DOUBLE_QUOTE:
            return Transition(LexerState.DEFAULT)
        if char == BACKSLASH:
            return Transition(LexerState.ESCAPE_IN_DOUBLE_QUOTE)
        return Transition(LexerState.IN_DOUBLE_QUOTE, emit=char)

    if state is LexerState.ESCAPE_IN_DEFAULT:
        return Transition(LexerState.DEFAULT, emit=char)

    if state is LexerState.ESCAPE_IN_DOUBLE_QUOTE:
        if char in DOUBLE_QUOTE_ESCAPABLE:
            return Transition(LexerState.IN_DOUBLE_QUOTE, emit=char)
        # Escape does not fire: keep the backslash
        return Transition(LexerState.IN_DOUBLE_QUOTE, emit=BACKSLASH + char)

    raise ValueError(f"unknown lexer state: {state!r}")


class ShellLexer:
    """
    Tokenizes a command line into arguments.

    Example:
        >>> ShellLexer("echo 'hello   world'").tokenize()
        ['echo', 'hello   world']
    """

    def __init__(self, line: str, max_args: int = DEFAULT_MAX_ARGS,
                 max_arg_length: int = DEFAULT_MAX_ARG_LENGTH):
        self.line = line
        self.max_args = max_args
        self.max_arg_length = max_arg_length

    @classmethod
    def from_config(cls, line: str, config: ShellConfig) -> 'ShellLexer':
        """Create a lexer using the limits from a ShellConfig."""
        return cls(line, max_args=config.max_args, max_arg_length=config.max_arg_length)

    def tokenize(self) -> List[str]:
        """
        Split the line into arguments.

        Returns:
            List of unescaped arguments (empty for a blank line)

        Raises:
            UnmatchedQuoteError: Input ended inside quotes
            TrailingBackslashError: Input ended with an unquoted backslash
            ArgumentTooLongError: An argument exceeded max_arg_length
            TooManyArgumentsError: More than max_args arguments
        """
        args: List[str] = []
        current: List[str] = []
        length = 0
        in_token = False
        state = LexerState.DEFAULT

        for position, char in enumerate(self.line):
            step = transition(state, char)
            state = step.state

            if step.boundary:
                if in_token:
                    self._append(args, current, position)
                    current = []
                    length = 0
                    in_token = False
                continue

            if step.starts_token or step.emit:
                in_token = True
            if step.emit:
                length += len(step.emit)
                if length > self.max_arg_length:
                    raise ArgumentTooLongError(self.line, self.max_arg_length, position)
                current.append(step.emit)

        self._check_final_state(state)

        if in_token:
            self._append(args, current, len(self.line))
        return args

    def _append(self, args: List[str], current: List[str], position: int):
        if len(args) >= self.max_args:
            raise TooManyArgumentsError(self.line, self.max_args, position)
        args.append(''.join(current))

    def _check_final_state(self, state: LexerState):
        if state is LexerState.IN_SINGLE_QUOTE:
            raise UnmatchedQuoteError(self.line, quote_char=SINGLE_QUOTE)
        if state in (LexerState.IN_DOUBLE_QUOTE, LexerState.ESCAPE_IN_DOUBLE_QUOTE):
            raise UnmatchedQuoteError(self.line, quote_char=DOUBLE_QUOTE)
        if state is LexerState.ESCAPE_IN_DEFAULT:
            raise TrailingBackslashError(self.line)


def lex(line: str, max_args: int = DEFAULT_MAX_ARGS,
        max_arg_length: int = DEFAULT_MAX_ARG_LENGTH) -> List[str]:
    """
    Tokenize a line with the given limits.

    Args:
        line: Raw input line, trailing newline already stripped
        max_args: Maximum number of arguments
        max_arg_length: Maximum length of one argument

    Returns:
        List of arguments; element 0 is the command name
    """
    return ShellLexer(line, max_args=max_args, max_arg_length=max_arg_length).tokenize()

