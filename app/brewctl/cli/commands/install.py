"""Install command implementation.

Installs the formulae and casks declared in the manifest, skipping any
that are already installed.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from brewctl.cli.display import (
    create_results_table,
    print_install_result,
    print_results_summary,
)
from brewctl.cli.types import (
    CONTEXT_SETTINGS,
    StrictUsageCommand,
    VerboseOption,
    VersionOption,
    fail,
)
from brewctl.core.errors import BrewctlError, PackageOperationError
from brewctl.core.manifest import load_manifest
from brewctl.core.paths import MANIFEST_ENV_VAR
from brewctl.core.preflight import verify_or_install_toolchain, verify_platform
from brewctl.core.reconciler import reconcile_category
from brewctl.managers.base import PackageManager
from brewctl.managers.homebrew import HomebrewManager
from brewctl.models.manifest import Manifest
from brewctl.models.outcome import InstallResult
from brewctl.models.package import PackageCategory
from brewctl.utils.formatting import (
    console,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from brewctl.utils.log import configure_logging
from brewctl.utils.shell import run_command

app = typer.Typer(
    name="brewctl-install",
    help="Install the formulae and casks declared in the manifest.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings=CONTEXT_SETTINGS,
)


def _print_python_note(manager: PackageManager, formula: str) -> None:
    """Report the Homebrew Python and how to put it on PATH.

    Informational only: failures are reported as warnings.
    """
    print_header("Python Setup Note")

    try:
        prefix = manager.prefix(formula)
    except PackageOperationError as e:
        print_warning(f"Could not locate {formula}: {e}")
        return

    python_bin = prefix / "bin" / "python3"
    if python_bin.is_file() and os.access(python_bin, os.X_OK):
        try:
            result = run_command([str(python_bin), "--version"])
        except OSError as e:
            print_warning(f"Could not run {python_bin}: {e}")
        else:
            if result.success:
                print_success(f"{result.stdout.strip()} installed at {python_bin}")

    print_info("Homebrew intentionally does not symlink Python to /usr/local/bin")
    print_info("to avoid conflicts with the macOS system Python.")
    print_info("")
    print_info("To use this Python by default, add the following to your ~/.zprofile:")
    print_info(f'    export PATH="$(brew --prefix {formula})/bin:$PATH"')
    print_info("")
    print_info("Or create an explicit alias in ~/.zshrc:")
    print_info(f'    alias python3="$(brew --prefix {formula})/bin/python3"')


def _run_install(manifest: Manifest) -> list[InstallResult]:
    """Run the whole install flow, raising on the first terminal error."""
    print_header("System Check")
    macos_version = verify_platform()
    print_success(f"Running on macOS {macos_version}")

    print_header("Homebrew Check")
    handle = verify_or_install_toolchain(install=False)
    manager = HomebrewManager(handle.brew)
    print_success(f"Homebrew found: {manager.version()}")

    print_info("Updating Homebrew before installing...")
    manager.update_metadata()
    print_success("Homebrew updated.")

    results: list[InstallResult] = []
    for category in PackageCategory:
        identifiers = manifest.packages.for_category(category)
        noun = "packages" if category is PackageCategory.FORMULA else "applications"
        print_header(f"Installing {category.plural.title()} ({len(identifiers)} {noun})")

        for result in reconcile_category(manager, category, identifiers):
            print_install_result(result)
            results.append(result)

    if manifest.python is not None:
        _print_python_note(manager, manifest.python.formula)

    return results


@app.command(cls=StrictUsageCommand)
def install(
    manifest_path: Annotated[
        Path | None,
        typer.Option(
            "--manifest",
            "-m",
            envvar=MANIFEST_ENV_VAR,
            help="Manifest to install from (default: ~/.config/brewctl/manifest.toml).",
            dir_okay=False,
        ),
    ] = None,
    verbose: VerboseOption = False,
    version: VersionOption = None,
) -> None:
    """Install the formulae and casks declared in the manifest.

    Packages that are already installed are skipped, so the command is
    safe to run repeatedly.

    Exit codes:
      0  All packages installed (or already present)
      1  Non-macOS system detected, invalid arguments or invalid manifest
      2  Homebrew not found
      3  Homebrew update failed
      4  A brew install or query failed
    """
    configure_logging(verbose)

    try:
        manifest = load_manifest(manifest_path)
        results = _run_install(manifest)
    except BrewctlError as e:
        fail(e)

    if results:
        console.print()
        console.print(create_results_table(results))
        print_results_summary(results)

    print_header("Installation Complete")
    print_success("All packages have been installed (or were already present).")
    print_info("Run 'brew list' to see everything installed on your system.")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
