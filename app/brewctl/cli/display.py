"""Shared Rich display functions for reconciliation and upgrade results.

Provides the per-package progress lines and the end-of-run summary table
used by the install and update commands.
"""

from rich.markup import escape
from rich.table import Table

from brewctl.models.outcome import InstallResult, UpgradeResult
from brewctl.models.package import PackageCategory
from brewctl.utils.formatting import console, print_info, print_skip, print_success


def print_install_result(result: InstallResult) -> None:
    """Print the progress line for one reconciled package.

    Args:
        result: Outcome of reconciling the package.
    """
    if result.installed:
        print_success(f"{result.identifier} installed.")
    else:
        print_skip(result.identifier)


def create_results_table(results: list[InstallResult]) -> Table:
    """Create a Rich table summarizing reconciled packages.

    Args:
        results: Results in the order packages were processed.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=10, justify="center")
    table.add_column("Category", width=8)
    table.add_column("Package", no_wrap=True)

    for result in results:
        if result.installed:
            status = "[installed]installed[/installed]"
        else:
            status = "[muted]present[/muted]"

        table.add_row(status, result.category.value, escape(result.identifier))

    return table


def print_results_summary(results: list[InstallResult]) -> None:
    """Print counts of installed and already-present packages.

    Args:
        results: Results of the reconciliation run.
    """
    installed = sum(1 for r in results if r.installed)
    present = sum(1 for r in results if r.already_present)

    console.print(
        f"\nSummary: [installed]{installed} installed[/installed], "
        f"[muted]{present} already present[/muted]"
    )


def print_upgrade_result(result: UpgradeResult) -> None:
    """Print the outcome of upgrading one category.

    Args:
        result: Outcome of the bulk upgrade.
    """
    if result.upgraded:
        print_success(f"All {result.category.plural} upgraded.")
    else:
        print_success(f"All {result.category.plural} are already up to date.")


def print_outdated_count(category: PackageCategory, count: int) -> None:
    """Print how many packages of a category are outdated.

    Args:
        category: Category that was queried.
        count: Number of outdated packages.
    """
    label = f"Outdated {category.plural}:"
    print_info(f"{label:<18} {count}")
