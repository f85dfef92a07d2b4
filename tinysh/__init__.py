"""tinysh - a small interactive command interpreter."""

from loguru import logger

__version__ = "0.1.0"

# Silent until the CLI calls configure_logging()
logger.disable("tinysh")
