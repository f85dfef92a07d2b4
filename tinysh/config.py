"""Runtime configuration for tinysh.

ShellConfig holds the few tunables of the interpreter. Values come from
keyword arguments, and can be overlaid from TINYSH_* environment variables
with ShellConfig.from_env().
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

ENV_PREFIX = "TINYSH_"

DEFAULT_PROMPT = "$ "
DEFAULT_MAX_ARGS = 4096
DEFAULT_MAX_ARG_LENGTH = 128 * 1024
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ShellConfig:
    """
    Settings shared by the lexer, the REPL and the CLI.

    Attributes:
        prompt: Text displayed before each line is read
        max_args: Maximum number of tokens a single line may produce
        max_arg_length: Maximum length of a single token, in characters
        log_level: loguru level used by configure_logging()

    Example:
        >>> config = ShellConfig(max_args=8)
        >>> config.prompt
        '$ '
    """

    prompt: str = DEFAULT_PROMPT
    max_args: int = DEFAULT_MAX_ARGS
    max_arg_length: int = DEFAULT_MAX_ARG_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        for name in ("max_args", "max_arg_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigurationError(name, str(value))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ShellConfig":
        """
        Build a config from TINYSH_* environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)
            **overrides: Explicit values that win over the environment

        Returns:
            ShellConfig instance

        Raises:
            ConfigurationError: If a numeric variable is not a positive integer
        """
        environ = os.environ if environ is None else environ
        values = {}

        for field_name in ("max_args", "max_arg_length"):
            var = ENV_PREFIX + field_name.upper()
            raw = environ.get(var)
            if raw is None:
                continue
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ConfigurationError(var, raw) from None

        level = environ.get(ENV_PREFIX + "LOG_LEVEL")
        if level:
            values["log_level"] = level.upper()

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

