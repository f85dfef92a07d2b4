"""
Base utilities for builtin implementations.

This module provides common helper functions that builtin modules use
to keep error reporting consistent.
"""

from ..exceptions import translate_os_error
from ..process import Process


def write_error(process: Process, message: str) -> int:
    """
    Write "<command>: <message>" to stderr.

    Args:
        process: The process object
        message: The error message

    Returns:
        Exit code (always 1)
    """
    process.stderr.write(f"{process.command}: {message}\n")
    return 1


def handle_os_error(process: Process, error: OSError, filename: str) -> int:
    """
    Report an OSError raised while operating on filename.

    Args:
        process: Process object with stderr stream
        error: The exception that was caught
        filename: The path as the user typed it

    Returns:
        Exit code of the translated error

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            return handle_os_error(process, e, path)
    """
    translated = translate_os_error(error, filename)
    process.stderr.write(f"{process.command}: {translated}\n")
    return translated.exit_code


__all__ = [
    'write_error',
    'handle_os_error',
]
