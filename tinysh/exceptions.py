"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from tinysh.exceptions import ParsingError

    try:
        argv = lex(line)
    except ParsingError as e:
        print(e)
        return e.exit_code
"""

import errno
from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ShellExit(Exception):
    """
    Raised by the exit builtin to terminate the REPL.

    Not a ShellError: it is control flow, never reported as a failure.

    Example:
        raise ShellExit(42)
    """

    def __init__(self, code: int = 0):
        super().__init__(code)
        self.code = code


class ConfigurationError(ShellError):
    """
    Raised when configuration values are invalid.

    Example:
        raise ConfigurationError("TINYSH_MAX_ARGS", "abc")
    """

    def __init__(self, name: str, value: str, details: str = "expected a positive integer"):
        message = f"invalid {name} {value!r}: {details}"
        super().__init__(message, exit_code=2)
        self.name = name
        self.value = value


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when filesystem operations fail.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.path = path


class FileNotFoundError(FileSystemError):
    """
    Raised when a file or directory does not exist.

    Example:
        raise FileNotFoundError("/path/to/dir")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path, exit_code=1)


class PermissionDeniedError(FileSystemError):
    """
    Raised when permission is denied for a filesystem operation.

    Example:
        raise PermissionDeniedError("/root")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Permission denied"
        super().__init__(message, path, exit_code=1)


class NotADirectoryError(FileSystemError):
    """
    Raised when a directory operation is attempted on a file.

    Example:
        raise NotADirectoryError("/etc/passwd")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Not a directory"
        super().__init__(message, path, exit_code=1)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command resolution or execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor on PATH.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class CommandSyntaxError(CommandError):
    """
    Raised when a builtin is invoked with bad usage.

    Example:
        raise CommandSyntaxError("type", "missing argument")
    """

    def __init__(self, command: str, details: str, exit_code: int = 2):
        message = f"{command}: {details}"
        super().__init__(command, message, exit_code=exit_code)


class SpawnError(CommandError):
    """
    Raised when the OS fails to start a child process.

    Example:
        raise SpawnError("ls", "Resource temporarily unavailable")
    """

    def __init__(self, command: str, reason: str):
        message = f"{command}: {reason}"
        super().__init__(command, message, exit_code=126)
        self.reason = reason


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when lexing shell input fails. The whole line is discarded.
    """

    def __init__(self, message: str, line: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message, exit_code=2)
        self.line = line
        self.position = position


class UnmatchedQuoteError(ParsingError):
    """
    Raised when input ends inside a quoted string.

    Example:
        raise UnmatchedQuoteError("echo 'hello", quote_char="'")
    """

    QUOTE_NAMES = {"'": "single", '"': "double"}

    def __init__(self, line: str, quote_char: str = '"'):
        self.quote_char = quote_char
        self.quote_name = self.QUOTE_NAMES[quote_char]
        message = f"unmatched {self.quote_name} quote"
        super().__init__(message, line=line, position=len(line))


class TrailingBackslashError(ParsingError):
    """
    Raised when an unquoted backslash is the last character of the input.

    Example:
        raise TrailingBackslashError("echo foo\\\\")
    """

    def __init__(self, line: str):
        super().__init__("trailing backslash", line=line, position=len(line))


class ArgumentTooLongError(ParsingError):
    """
    Raised when a single token exceeds the configured maximum length.
    """

    def __init__(self, line: str, limit: int, position: Optional[int] = None):
        super().__init__(f"argument too long (limit {limit})", line=line, position=position)
        self.limit = limit


class TooManyArgumentsError(ParsingError):
    """
    Raised when a line produces more tokens than the configured maximum.
    """

    def __init__(self, line: str, limit: int, position: Optional[int] = None):
        super().__init__(f"too many arguments (limit {limit})", line=line, position=position)
        self.limit = limit


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: Optional[str] = None) -> FileSystemError:
    """
    Translate an OSError into a specific FileSystemError.

    Args:
        error: The OSError raised by an os call
        path: Path as the user typed it (used in the message)

    Returns:
        Specific FileSystemError subclass

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            raise translate_os_error(e, path)
    """
    path = path if path is not None else (error.filename or "unknown")

    if error.errno == errno.ENOENT:
        return FileNotFoundError(path)

    if error.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(path)

    if error.errno == errno.ENOTDIR:
        return NotADirectoryError(path)

    reason = error.strerror or str(error)
    return FileSystemError(f"{path}: {reason}", path=path)
