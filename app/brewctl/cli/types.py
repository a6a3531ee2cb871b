"""Shared types and utilities for CLI commands.

This module provides the command class, options and error handling shared
by both entry points.
"""

from typing import Annotated, NoReturn

import typer
from typer import core as typer_core
from typer.core import TyperCommand

from brewctl import __version__
from brewctl.core.errors import BrewctlError, ExitCode
from brewctl.utils.formatting import print_error

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Typer releases that vendor click expose it as typer.core._click, older ones
# import the click distribution. Usage errors come from whichever is in use.
_click = getattr(typer_core, "_click", None) or typer_core.click


class StrictUsageCommand(TyperCommand):
    """Typer command that exits with code 1 on unknown or invalid arguments.

    Click reports usage errors with exit code 2; both entry points reserve
    2 for a missing Homebrew installation.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except _click.exceptions.UsageError as e:
            e.exit_code = int(ExitCode.INVALID_ARGUMENT)
            raise


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"brewctl version {__version__}")
        raise typer.Exit()


VersionOption = Annotated[
    bool | None,
    typer.Option(
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Echo every external command before running it.",
    ),
]


def fail(error: BrewctlError) -> NoReturn:
    """Report a terminal error and exit with its code.

    Args:
        error: The error that aborted the run.

    Raises:
        typer.Exit: Always, with the error's exit code.
    """
    print_error(str(error))
    raise typer.Exit(code=int(error.exit_code)) from error
