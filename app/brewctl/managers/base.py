"""Abstract base class for package managers.

This module defines the PackageManager interface the reconciler and
upgrade flow talk to. All state lives in the external tool; implementations
only query and mutate it.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from brewctl.models.package import PackageCategory


class PackageManager(ABC):
    """Abstract base class for the external package manager.

    Example:
        >>> manager = HomebrewManager("/opt/homebrew/bin/brew")
        >>> if not manager.is_installed("wget", PackageCategory.FORMULA):
        ...     manager.install(PackageCategory.FORMULA, "wget")
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the package manager can be invoked.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    @abstractmethod
    def list_installed(self, category: PackageCategory) -> set[str]:
        """Return the identifiers currently installed in a category.

        Raises:
            PackageOperationError: If the query fails.
        """

    @abstractmethod
    def install(self, category: PackageCategory, identifier: str) -> None:
        """Install a single package.

        Raises:
            PackageOperationError: If the install fails.
        """

    @abstractmethod
    def list_outdated(self, category: PackageCategory) -> set[str]:
        """Return the installed identifiers that are behind the latest version.

        Raises:
            PackageOperationError: If the query fails.
        """

    @abstractmethod
    def upgrade_all(self, category: PackageCategory) -> None:
        """Upgrade every outdated package in a category with one call.

        Raises:
            PackageOperationError: If the upgrade fails.
        """

    @abstractmethod
    def update_metadata(self) -> None:
        """Refresh the package manager's own metadata.

        Raises:
            MetadataUpdateError: If the update fails.
        """

    @abstractmethod
    def cleanup(self) -> bool:
        """Remove stale downloads and old versions.

        Best-effort: failures are reported through the return value.

        Returns:
            True if cleanup succeeded, False otherwise.
        """

    @abstractmethod
    def version(self) -> str:
        """Return the package manager's version string."""

    @abstractmethod
    def prefix(self, identifier: str) -> Path:
        """Return the installation prefix of a package."""

    def is_installed(self, identifier: str, category: PackageCategory) -> bool:
        """Check if a package is in the currently installed set.

        The installed set is queried on every call and never cached.
        """
        return identifier in self.list_installed(category)
