"""
CD command - change the working directory.
"""

from loguru import logger

from ..exceptions import CommandSyntaxError
from ..process import Process
from .base import handle_os_error, write_error

HOME_ALIAS = '~'


def cmd_cd(process: Process) -> int:
    """
    Change directory

    Usage: cd [path]

    With no path, or a path of ~, changes to $HOME. The working directory
    is left unchanged on any failure.
    """
    if len(process.args) > 1:
        raise CommandSyntaxError(process.command, "too many arguments")

    target = process.args[0] if process.args else HOME_ALIAS
    path_manager = process.context.path_manager

    if target == HOME_ALIAS:
        home = path_manager.home_directory()
        if home is None:
            return write_error(process, "HOME not set")
        target = home

    try:
        path_manager.change_directory(target)
    except OSError as e:
        return handle_os_error(process, e, target)

    logger.debug("cwd is now {}", target)
    return 0
