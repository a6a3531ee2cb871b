"""Unit tests for the reconciler.

Tests for per-package installs and bulk upgrades against a recording
package manager.
"""

from collections.abc import Callable

import pytest
from brewctl.core.errors import PackageOperationError
from brewctl.core.reconciler import (
    ensure_installed,
    find_outdated,
    reconcile,
    reconcile_category,
    upgrade_outdated,
)
from brewctl.models.manifest import PackageConfig
from brewctl.models.outcome import InstallOutcome, UpgradeOutcome
from brewctl.models.package import PackageCategory
from fakes import FakePackageManager

FORMULA = PackageCategory.FORMULA
CASK = PackageCategory.CASK


class TestEnsureInstalled:
    """Tests for ensure_installed."""

    def test_already_present_does_not_install(
        self, make_manager: Callable[..., FakePackageManager]
    ) -> None:
        """An installed formula is left alone."""
        manager = make_manager(formulae=["foo"])

        outcome = ensure_installed(manager, "foo", FORMULA)

        assert outcome == InstallOutcome.ALREADY_PRESENT
        assert "install" not in manager.call_names()

    def test_absent_is_installed_once(self, fake_manager: FakePackageManager) -> None:
        """A missing formula triggers exactly one install call."""
        outcome = ensure_installed(fake_manager, "foo", FORMULA)

        assert outcome == InstallOutcome.INSTALLED
        installs = [c for c in fake_manager.calls if c[0] == "install"]
        assert installs == [("install", "formula", "foo")]

    def test_idempotent_across_calls(self, fake_manager: FakePackageManager) -> None:
        """Second call sees the first install and does nothing."""
        first = ensure_installed(fake_manager, "foo", FORMULA)
        second = ensure_installed(fake_manager, "foo", FORMULA)
        third = ensure_installed(fake_manager, "foo", FORMULA)

        assert first == InstallOutcome.INSTALLED
        assert second == InstallOutcome.ALREADY_PRESENT
        assert third == InstallOutcome.ALREADY_PRESENT
        assert fake_manager.call_names().count("install") == 1

    def test_queries_installed_set_on_every_call(
        self, fake_manager: FakePackageManager
    ) -> None:
        """The installed set is never cached between checks."""
        ensure_installed(fake_manager, "foo", FORMULA)
        ensure_installed(fake_manager, "foo", FORMULA)

        assert fake_manager.call_names().count("list_installed") == 2

    def test_category_is_respected(self, make_manager: Callable[..., FakePackageManager]) -> None:
        """A formula with the same name does not satisfy a cask."""
        manager = make_manager(formulae=["docker"])

        outcome = ensure_installed(manager, "docker", CASK)

        assert outcome == InstallOutcome.INSTALLED
        assert ("install", "cask", "docker") in manager.calls

    def test_install_failure_propagates(
        self, make_manager: Callable[..., FakePackageManager]
    ) -> None:
        """Install errors are not swallowed."""
        manager = make_manager(fail_install=["broken"])

        with pytest.raises(PackageOperationError, match="broken"):
            ensure_installed(manager, "broken", FORMULA)


class TestReconcile:
    """Tests for reconcile and reconcile_category."""

    def test_formulae_before_casks_in_declaration_order(
        self, fake_manager: FakePackageManager
    ) -> None:
        """Results follow declaration order, formulae first."""
        packages = PackageConfig(formulae=["zsh", "awk"], casks=["zed", "arc"])

        results = list(reconcile(fake_manager, packages))

        assert [(r.category, r.identifier) for r in results] == [
            (FORMULA, "zsh"),
            (FORMULA, "awk"),
            (CASK, "zed"),
            (CASK, "arc"),
        ]
        installs = [c[2] for c in fake_manager.calls if c[0] == "install"]
        assert installs == ["zsh", "awk", "zed", "arc"]

    def test_mixed_outcomes(self, make_manager: Callable[..., FakePackageManager]) -> None:
        """Present packages are skipped, missing ones installed."""
        manager = make_manager(formulae=["git"], casks=["firefox"])
        packages = PackageConfig(formulae=["git", "wget"], casks=["firefox", "slack"])

        results = list(reconcile(manager, packages))

        assert [r.outcome for r in results] == [
            InstallOutcome.ALREADY_PRESENT,
            InstallOutcome.INSTALLED,
            InstallOutcome.ALREADY_PRESENT,
            InstallOutcome.INSTALLED,
        ]

    def test_duplicates_are_redundant_checks(self, fake_manager: FakePackageManager) -> None:
        """A duplicated identifier installs once and is skipped the second time."""
        packages = PackageConfig(formulae=["foo", "foo"])

        results = list(reconcile(fake_manager, packages))

        assert [r.outcome for r in results] == [
            InstallOutcome.INSTALLED,
            InstallOutcome.ALREADY_PRESENT,
        ]

    def test_stops_at_first_failure(self, make_manager: Callable[..., FakePackageManager]) -> None:
        """A failing install aborts the remaining packages."""
        manager = make_manager(fail_install=["bad"])
        packages = PackageConfig(formulae=["ok", "bad", "never"])

        results = []
        with pytest.raises(PackageOperationError):
            for result in reconcile(manager, packages):
                results.append(result)

        assert [r.identifier for r in results] == ["ok"]
        assert ("install", "formula", "never") not in manager.calls

    def test_reconcile_category_is_lazy(self, fake_manager: FakePackageManager) -> None:
        """Nothing is queried until results are consumed."""
        results = reconcile_category(fake_manager, CASK, ["a", "b"])

        assert fake_manager.calls == []
        next(results)
        assert fake_manager.calls == [("list_installed", "cask"), ("install", "cask", "a")]

    def test_empty_declaration(self, fake_manager: FakePackageManager) -> None:
        """An empty manifest does nothing."""
        assert list(reconcile(fake_manager, PackageConfig())) == []
        assert fake_manager.calls == []


class TestUpgradeOutdated:
    """Tests for upgrade_outdated."""

    def test_nothing_outdated_skips_upgrade(self, fake_manager: FakePackageManager) -> None:
        """Zero outdated packages never invokes the upgrade."""
        result = upgrade_outdated(fake_manager, FORMULA)

        assert result.outcome == UpgradeOutcome.NOTHING_TO_DO
        assert result.outdated_count == 0
        assert fake_manager.calls == [("list_outdated", "formula")]

    @pytest.mark.parametrize("count", [1, 2, 25])
    def test_outdated_upgrades_exactly_once(
        self, make_manager: Callable[..., FakePackageManager], count: int
    ) -> None:
        """Any positive count issues a single bulk upgrade."""
        manager = make_manager(outdated_casks=[f"app-{i}" for i in range(count)])

        result = upgrade_outdated(manager, CASK)

        assert result.outcome == UpgradeOutcome.UPGRADED
        assert result.outdated_count == count
        assert manager.call_names().count("upgrade_all") == 1
        assert ("upgrade_all", "cask") in manager.calls

    def test_outdated_are_sorted(self, make_manager: Callable[..., FakePackageManager]) -> None:
        """Outdated identifiers are reported in sorted order."""
        manager = make_manager(outdated_formulae=["node", "git", "jq"])

        result = upgrade_outdated(manager, FORMULA)

        assert result.outdated == ("git", "jq", "node")

    def test_categories_are_independent(
        self, make_manager: Callable[..., FakePackageManager]
    ) -> None:
        """Outdated casks do not trigger a formula upgrade."""
        manager = make_manager(outdated_casks=["slack"])

        result = upgrade_outdated(manager, FORMULA)

        assert result.outcome == UpgradeOutcome.NOTHING_TO_DO
        assert "upgrade_all" not in manager.call_names()

    def test_precomputed_outdated_skips_query(
        self, make_manager: Callable[..., FakePackageManager]
    ) -> None:
        """Passing already queried identifiers does not query again."""
        manager = make_manager(outdated_formulae=["wget"])

        result = upgrade_outdated(manager, FORMULA, ["wget"])

        assert result.outcome == UpgradeOutcome.UPGRADED
        assert manager.calls == [("upgrade_all", "formula")]

    def test_precomputed_empty_does_nothing(self, fake_manager: FakePackageManager) -> None:
        """An empty precomputed set makes no call at all."""
        result = upgrade_outdated(fake_manager, CASK, ())

        assert result.outcome == UpgradeOutcome.NOTHING_TO_DO
        assert fake_manager.calls == []


class TestFindOutdated:
    """Tests for find_outdated."""

    def test_sorted_without_upgrading(
        self, make_manager: Callable[..., FakePackageManager]
    ) -> None:
        """find_outdated only queries and returns sorted identifiers."""
        manager = make_manager(outdated_casks=["zoom", "firefox"])

        assert find_outdated(manager, CASK) == ("firefox", "zoom")
        assert manager.calls == [("list_outdated", "cask")]
