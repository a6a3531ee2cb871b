"""Logging setup for the CLI entry points."""

import logging

from rich.logging import RichHandler

from brewctl.utils.formatting import err_console


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr.

    Verbose mode lowers the level to DEBUG, which echoes every external
    command before it runs.

    Args:
        verbose: Enable debug output and command echo.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )
