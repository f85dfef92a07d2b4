"""Unit tests for ShellConfig and logging setup."""

import pytest

from tinysh.config import DEFAULT_MAX_ARGS, ShellConfig
from tinysh.exceptions import ConfigurationError
from tinysh.logging_utils import configure_logging


class TestShellConfig:
    """Tests for ShellConfig defaults and validation."""

    def test_defaults(self):
        config = ShellConfig()
        assert config.prompt == '$ '
        assert config.max_args == DEFAULT_MAX_ARGS
        assert config.max_arg_length > 0
        assert config.log_level == 'WARNING'

    @pytest.mark.parametrize('field', ['max_args', 'max_arg_length'])
    def test_non_positive_limits_rejected(self, field):
        with pytest.raises(ConfigurationError) as exc_info:
            ShellConfig(**{field: 0})
        assert exc_info.value.exit_code == 2

    def test_config_is_frozen(self):
        config = ShellConfig()
        with pytest.raises(AttributeError):
            config.prompt = '% '


class TestFromEnv:
    """Tests for environment overlay."""

    def test_empty_environment_gives_defaults(self):
        assert ShellConfig.from_env({}) == ShellConfig()

    def test_reads_prefixed_variables(self):
        config = ShellConfig.from_env({
            'TINYSH_MAX_ARGS': '16',
            'TINYSH_MAX_ARG_LENGTH': '64',
            'TINYSH_LOG_LEVEL': 'debug',
        })
        assert config.max_args == 16
        assert config.max_arg_length == 64
        assert config.log_level == 'DEBUG'

    def test_overrides_win(self):
        config = ShellConfig.from_env({'TINYSH_LOG_LEVEL': 'INFO'}, log_level='ERROR', prompt=None)
        assert config.log_level == 'ERROR'
        assert config.prompt == '$ '

    def test_non_numeric_value_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ShellConfig.from_env({'TINYSH_MAX_ARGS': 'lots'})
        assert 'TINYSH_MAX_ARGS' in str(exc_info.value)

    def test_negative_value_rejected(self):
        with pytest.raises(ConfigurationError):
            ShellConfig.from_env({'TINYSH_MAX_ARG_LENGTH': '-1'})


class TestConfigureLogging:
    """Tests for loguru setup."""

    def test_unknown_level_rejected(self):
        with pytest.raises(ConfigurationError):
            configure_logging('NOT_A_LEVEL')
