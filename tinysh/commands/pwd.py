"""
PWD command - print working directory.
"""

from ..process import Process
from .base import write_error


def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd
    """
    try:
        cwd = process.context.path_manager.get_cwd()
    except OSError as e:
        return write_error(process, e.strerror or str(e))

    process.stdout.write(f"{cwd}\n")
    return 0
