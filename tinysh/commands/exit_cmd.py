"""
EXIT command - terminate the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit builtin.
"""

import re

from ..exceptions import ShellExit
from ..process import Process

_LEADING_INTEGER = re.compile(r'[ \t\n\v\f\r]*([+-]?[0-9]+)', re.ASCII)


def parse_exit_code(text: str) -> int:
    """
    Parse an exit status permissively.

    Leading ASCII whitespace, an optional sign and leading ASCII digits are read;
    anything that does not start with a number is 0. The result is
    reduced modulo 256.

    Examples:
        >>> parse_exit_code('7')
        7
        >>> parse_exit_code('abc')
        0
        >>> parse_exit_code('300')
        44
        >>> parse_exit_code('-1')
        255
    """
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return 0
    return int(match.group(1)) % 256


def cmd_exit(process: Process) -> int:
    """
    Exit the shell with an optional status

    Usage: exit [n]

    Examples:
        exit          # Exit with status 0
        exit 42       # Exit with status 42
    """
    code = parse_exit_code(process.args[0]) if process.args else 0
    raise ShellExit(code)
