"""Update command implementation.

Makes sure Homebrew is installed, refreshes its metadata and upgrades
every outdated formula and cask, optionally cleaning up afterwards.
"""

from typing import Annotated

import typer

from brewctl.cli.display import print_outdated_count, print_upgrade_result
from brewctl.cli.types import (
    CONTEXT_SETTINGS,
    StrictUsageCommand,
    VerboseOption,
    VersionOption,
    fail,
)
from brewctl.core.errors import BrewctlError
from brewctl.core.preflight import ToolchainHandle, verify_or_install_toolchain, verify_platform
from brewctl.core.reconciler import find_outdated, upgrade_outdated
from brewctl.managers.homebrew import HomebrewManager
from brewctl.models.package import PackageCategory
from brewctl.utils.formatting import (
    console,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from brewctl.utils.log import configure_logging

app = typer.Typer(
    name="brewctl-update",
    help="Install or update Homebrew and upgrade all outdated packages.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings=CONTEXT_SETTINGS,
)


def _report_toolchain(handle: ToolchainHandle, manager: HomebrewManager) -> None:
    """Print where brew was found, or how to persist a fresh install."""
    if not handle.freshly_installed:
        print_success(f"Homebrew found at: {handle.brew}")
        print_info(f"Version: {manager.version()}")
        return

    print_success(f"Homebrew installed successfully: {manager.version()}")
    console.print()
    print_info("To make 'brew' available in future shell sessions, add the following")
    print_info("to your ~/.zprofile (or ~/.bash_profile for bash):")
    print_info(f"  {handle.shellenv_hint}")


def _run_update(cleanup: bool) -> None:
    """Run the whole update flow, raising on the first terminal error."""
    print_header("System Check")
    macos_version = verify_platform()
    print_success(f"Running on macOS {macos_version}")

    print_header("Homebrew Detection")
    handle = verify_or_install_toolchain(install=True)
    manager = HomebrewManager(handle.brew)
    _report_toolchain(handle, manager)

    print_header("Updating Homebrew")
    print_info("Fetching latest Homebrew formulae and cask definitions...")
    manager.update_metadata()
    print_success("Homebrew is up to date.")

    print_header("Upgrading Installed Packages")
    outdated = {category: find_outdated(manager, category) for category in PackageCategory}
    for category, identifiers in outdated.items():
        print_outdated_count(category, len(identifiers))
    console.print()

    for category, identifiers in outdated.items():
        if identifiers:
            print_info(f"Upgrading {category.plural}...")
        print_upgrade_result(upgrade_outdated(manager, category, identifiers))

    if cleanup:
        print_header("Cleaning Up")
        print_info("Removing outdated downloads and old versions to free disk space...")
        if manager.cleanup():
            print_success("Cleanup complete.")
        else:
            print_warning("Cleanup did not complete; run 'brew cleanup' manually.")
    else:
        print_warning("Skipping cleanup (--no-cleanup was specified).")
        print_info("Run 'brew cleanup' manually to remove old versions and free disk space.")

    print_header("Done")
    print_success("Homebrew and all installed packages are up to date.")


@app.command(cls=StrictUsageCommand)
def update(
    no_cleanup: Annotated[
        bool,
        typer.Option(
            "--no-cleanup",
            help="Skip the `brew cleanup` step after upgrading.",
        ),
    ] = False,
    verbose: VerboseOption = False,
    version: VersionOption = None,
) -> None:
    """Install or update Homebrew and upgrade all outdated packages.

    Exit codes:
      0  Success
      1  Non-macOS system detected or invalid arguments
      2  Homebrew installation failed
      3  Homebrew update failed
      4  A brew upgrade or query failed
    """
    configure_logging(verbose)

    try:
        _run_update(cleanup=not no_cleanup)
    except BrewctlError as e:
        fail(e)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
