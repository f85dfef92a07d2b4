"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Shell instances with captured output and scripted input
- Temporary PATH directories holding executable scripts
- Process objects for calling builtins directly
"""

import io
import os
import stat
from typing import Dict, List, Optional

import pytest


# ============================================================================
# Helper Functions
# ============================================================================

def make_executable(directory, name: str, body: str = "exit 0\n", mode: int = 0o755):
    """
    Create a /bin/sh script in directory.

    Args:
        directory: pathlib.Path of the target directory
        name: File name
        body: Script body (after the shebang line)
        mode: File mode (default: executable by everyone)

    Returns:
        pathlib.Path of the script
    """
    script = directory / name
    script.write_text("#!/bin/sh\n" + body)
    os.chmod(script, mode)
    return script


def make_plain_file(directory, name: str):
    """Create a non-executable file in directory."""
    path = directory / name
    path.write_text("not a program\n")
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)
    return path


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def preserve_cwd(monkeypatch):
    """
    Restore the working directory after every test.

    cd changes process-wide state; monkeypatch.chdir records the original
    directory and restores it at teardown.
    """
    monkeypatch.chdir(os.getcwd())


@pytest.fixture
def bin_dir(tmp_path):
    """
    Provides an empty directory to use as a PATH entry.

    Returns:
        pathlib.Path: Directory for executable scripts

    Example:
        def test_lookup(bin_dir):
            make_executable(bin_dir, 'hello')
    """
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing command output.

    Returns:
        tuple: (stdout, stderr) StringIO objects
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def make_shell(capture_output):
    """
    Factory for Shell instances with captured streams.

    Returns:
        Callable taking (lines=None, env=None, config=None) and returning
        a Shell whose stdout/stderr are the capture_output buffers

    Example:
        def test_echo(make_shell):
            shell = make_shell()
            shell.execute('echo hi')
            assert shell.stdout.getvalue() == 'hi\\n'
    """
    from tinysh.reader import ScriptedLineReader
    from tinysh.shell import Shell

    stdout, stderr = capture_output

    def _make(lines: Optional[List[str]] = None, env: Optional[Dict[str, str]] = None,
              config=None):
        if env is None:
            env = {'HOME': os.getcwd()}
        return Shell(
            config=config,
            reader=ScriptedLineReader(lines or []),
            stdout=stdout,
            stderr=stderr,
            env=env,
        )

    return _make


@pytest.fixture
def make_process(capture_output):
    """
    Factory for Process instances that call a builtin directly.

    Returns:
        Callable taking (command, *args, env=None) and returning a Process
        with captured streams and a context bound to the default registry
    """
    from tinysh.commands import create_default_registry
    from tinysh.context import CommandContext
    from tinysh.process import Process

    stdout, stderr = capture_output

    def _make(command: str, *args: str, env: Optional[Dict[str, str]] = None):
        registry = create_default_registry()
        context = CommandContext(env=env if env is not None else {}, builtins=registry)
        return Process(
            command=command,
            args=list(args),
            stdout=stdout,
            stderr=stderr,
            executor=registry.resolve(command),
            context=context,
        )

    return _make


# Make helper functions available as pytest helpers
pytest.make_executable = make_executable
pytest.make_plain_file = make_plain_file
