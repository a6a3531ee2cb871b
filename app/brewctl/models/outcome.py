"""Outcome models for reconciliation and upgrade runs.

This module defines the results produced when the declared package set
is reconciled against Homebrew, and when outdated packages are upgraded.
"""

from dataclasses import dataclass
from enum import Enum

from brewctl.models.package import PackageCategory


class InstallOutcome(Enum):
    """Outcome of ensuring a single package is installed.

    Attributes:
        ALREADY_PRESENT: Package was installed before; nothing was done.
        INSTALLED: Package was missing and has been installed.
    """

    ALREADY_PRESENT = "already_present"
    INSTALLED = "installed"


class UpgradeOutcome(Enum):
    """Outcome of a bulk upgrade for one category.

    Attributes:
        NOTHING_TO_DO: No outdated packages; the upgrade call was skipped.
        UPGRADED: A single bulk upgrade was issued for the category.
    """

    NOTHING_TO_DO = "nothing_to_do"
    UPGRADED = "upgraded"


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Result of reconciling a single declared package.

    Attributes:
        identifier: Homebrew formula or cask token.
        category: Category the package was declared under.
        outcome: Whether the package was already present or just installed.
    """

    identifier: str
    category: PackageCategory
    outcome: InstallOutcome

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.identifier:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)

    @property
    def installed(self) -> bool:
        """Check if the package was installed during this run."""
        return self.outcome == InstallOutcome.INSTALLED

    @property
    def already_present(self) -> bool:
        """Check if the package was already installed."""
        return self.outcome == InstallOutcome.ALREADY_PRESENT


@dataclass(frozen=True, slots=True)
class UpgradeResult:
    """Result of upgrading every outdated package in a category.

    Attributes:
        category: Category that was checked.
        outdated: Sorted identifiers reported outdated before upgrading.
        outcome: Whether an upgrade was issued.
    """

    category: PackageCategory
    outdated: tuple[str, ...]
    outcome: UpgradeOutcome

    @property
    def outdated_count(self) -> int:
        """Number of packages that were outdated before the upgrade."""
        return len(self.outdated)

    @property
    def upgraded(self) -> bool:
        """Check if a bulk upgrade was issued."""
        return self.outcome == UpgradeOutcome.UPGRADED
