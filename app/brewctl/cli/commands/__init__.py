"""CLI commands for brewctl.

This package contains the command implementations.
"""

from brewctl.cli.commands import install, update

__all__ = ["install", "update"]
