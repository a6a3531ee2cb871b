"""Reconciliation of declared packages against Homebrew.

Compares the declared package set with what is installed and performs the
minimal action to align them: install missing packages, leave present ones
alone. Also provides the bulk upgrade of outdated packages.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from brewctl.models.outcome import (
    InstallOutcome,
    InstallResult,
    UpgradeOutcome,
    UpgradeResult,
)
from brewctl.models.package import PackageCategory

if TYPE_CHECKING:
    from brewctl.managers.base import PackageManager
    from brewctl.models.manifest import PackageConfig

logger = logging.getLogger(__name__)


def ensure_installed(
    manager: PackageManager,
    identifier: str,
    category: PackageCategory,
) -> InstallOutcome:
    """Install a package unless it is already installed.

    Repeated calls with no outside change perform at most one install.

    Args:
        manager: Package manager to query and mutate.
        identifier: Formula or cask token.
        category: Category the identifier belongs to.

    Returns:
        ALREADY_PRESENT if nothing was done, INSTALLED otherwise.

    Raises:
        PackageOperationError: If the query or install fails.
    """
    if manager.is_installed(identifier, category):
        logger.debug("%s %s already installed", category.value, identifier)
        return InstallOutcome.ALREADY_PRESENT

    manager.install(category, identifier)
    return InstallOutcome.INSTALLED


def reconcile_category(
    manager: PackageManager,
    category: PackageCategory,
    identifiers: Iterable[str],
) -> Iterator[InstallResult]:
    """Ensure every identifier of one category is installed, in order.

    Results are yielded as each package is handled so callers can report
    progress between installs.
    """
    for identifier in identifiers:
        outcome = ensure_installed(manager, identifier, category)
        yield InstallResult(identifier=identifier, category=category, outcome=outcome)


def reconcile(manager: PackageManager, packages: PackageConfig) -> Iterator[InstallResult]:
    """Ensure every declared package is installed.

    Formulae are handled before casks; each in declaration order.
    """
    for category in PackageCategory:
        yield from reconcile_category(manager, category, packages.for_category(category))


def find_outdated(manager: PackageManager, category: PackageCategory) -> tuple[str, ...]:
    """Return the outdated identifiers of a category, sorted."""
    return tuple(sorted(manager.list_outdated(category)))


def upgrade_outdated(
    manager: PackageManager,
    category: PackageCategory,
    outdated: Iterable[str] | None = None,
) -> UpgradeResult:
    """Upgrade all outdated packages of a category with a single call.

    The upgrade is skipped entirely when nothing is outdated.

    Args:
        manager: Package manager to query and mutate.
        category: Category to upgrade.
        outdated: Outdated identifiers already queried with
            :func:`find_outdated`. Queried here when None.

    Returns:
        UpgradeResult with the outdated identifiers and the outcome.

    Raises:
        PackageOperationError: If the query or upgrade fails.
    """
    if outdated is None:
        identifiers = find_outdated(manager, category)
    else:
        identifiers = tuple(sorted(outdated))

    if not identifiers:
        return UpgradeResult(
            category=category,
            outdated=identifiers,
            outcome=UpgradeOutcome.NOTHING_TO_DO,
        )

    logger.debug("Outdated %s: %s", category.plural, ", ".join(identifiers))
    manager.upgrade_all(category)
    return UpgradeResult(category=category, outdated=identifiers, outcome=UpgradeOutcome.UPGRADED)
