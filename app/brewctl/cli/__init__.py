"""CLI package for brewctl.

This package contains the two Typer entry points: brewctl-update and
brewctl-install.
"""
