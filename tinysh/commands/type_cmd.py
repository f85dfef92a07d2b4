"""
TYPE command - describe how a name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..exceptions import CommandSyntaxError
from ..process import Process


def cmd_type(process: Process) -> int:
    """
    Display how each name would be run

    Usage: type name [name ...]

    Reports builtins as "<name> is a shell builtin" and external programs
    as "<name> is <path>" using the same PATH search as command execution.
    Unknown names print "<name>: not found" to stderr.

    Returns:
        0 if every name was found, 1 otherwise

    Raises:
        CommandSyntaxError: If no name is given
    """
    if not process.args:
        raise CommandSyntaxError(process.command, "missing argument")

    context = process.context
    exit_code = 0

    for name in process.args:
        if context.is_builtin(name):
            process.stdout.write(f"{name} is a shell builtin\n")
            continue

        path = context.find_executable(name)
        if path is not None:
            process.stdout.write(f"{name} is {path}\n")
        else:
            process.stderr.write(f"{name}: not found\n")
            exit_code = 1

    return exit_code
