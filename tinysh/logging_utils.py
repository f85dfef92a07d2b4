"""Runtime logging helpers."""

import sys

from loguru import logger

from .config import DEFAULT_LOG_LEVEL
from .exceptions import ConfigurationError

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL = None


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure process-level logging once.

    The package logger is disabled on import; this enables it and routes
    records at or above level to stderr.
    """
    global _CONFIGURED_LEVEL
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    try:
        logger.add(
            sys.stderr,
            level=level,
            format=_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    except ValueError as e:
        raise ConfigurationError("log level", level, str(e)) from e
    logger.enable("tinysh")
    _CONFIGURED_LEVEL = level
