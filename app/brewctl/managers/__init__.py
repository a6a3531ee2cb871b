"""Package manager backends.

This module exports the PackageManager interface and its Homebrew implementation.
"""

from brewctl.managers.base import PackageManager
from brewctl.managers.homebrew import HomebrewManager

__all__ = ["HomebrewManager", "PackageManager"]
