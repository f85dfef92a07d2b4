"""tinysh command line entry point."""

from typing import Optional

import typer

from tinysh import __version__
from tinysh.config import ShellConfig
from tinysh.exceptions import ConfigurationError, ShellExit
from tinysh.logging_utils import configure_logging
from tinysh.shell import Shell

app = typer.Typer(
    name="tinysh",
    help="A small interactive command interpreter.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tinysh {__version__}")
        raise typer.Exit()


@app.command()
def main(
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Run a single command line and exit with its status."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level for diagnostics on stderr (overrides TINYSH_LOG_LEVEL)."
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Start the shell, or run one command with -c."""
    try:
        config = ShellConfig.from_env(log_level=log_level.upper() if log_level else None)
        configure_logging(config.log_level)
    except ConfigurationError as e:
        typer.echo(f"tinysh: {e}", err=True)
        raise typer.Exit(e.exit_code) from None

    shell = Shell(config=config)

    if command is not None:
        try:
            exit_code = shell.execute(command)
        except ShellExit as e:
            exit_code = e.code
    else:
        exit_code = shell.repl()

    raise typer.Exit(exit_code)
