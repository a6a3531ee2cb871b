"""Package models for Homebrew reconciliation.

This module defines the package categories understood by Homebrew.
"""

from enum import Enum


class PackageCategory(Enum):
    """Enumeration of Homebrew package categories.

    Attributes:
        FORMULA: Command-line tools and libraries.
        CASK: macOS GUI applications.
    """

    FORMULA = "formula"
    CASK = "cask"

    @property
    def flag(self) -> str:
        """Return the brew CLI flag selecting this category (e.g. '--cask')."""
        return f"--{self.value}"

    @property
    def plural(self) -> str:
        """Return the plural label used in output ('formulae' or 'casks')."""
        return "formulae" if self is PackageCategory.FORMULA else "casks"
