"""Homebrew package manager implementation.

Queries and mutates Homebrew through the brew CLI. Queries capture output;
mutating commands inherit the terminal so brew's progress output and any
password prompts reach the user.
"""

import logging
from pathlib import Path

from brewctl.core.errors import MetadataUpdateError, PackageOperationError
from brewctl.managers.base import PackageManager
from brewctl.models.package import PackageCategory
from brewctl.utils.shell import CommandResult, command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)


class HomebrewManager(PackageManager):
    """PackageManager backed by the brew executable.

    Attributes:
        brew: Path or name of the brew executable.
    """

    def __init__(self, brew: str | Path = "brew") -> None:
        """Initialize the manager.

        Args:
            brew: Path to the brew executable, or a name looked up on PATH.
        """
        self._brew = str(brew)

    @property
    def brew(self) -> str:
        """Return the brew executable used for every command."""
        return self._brew

    def is_available(self) -> bool:
        """Check if the brew executable can be found."""
        if Path(self._brew).is_absolute():
            return Path(self._brew).is_file()
        return command_exists(self._brew)

    def list_installed(self, category: PackageCategory) -> set[str]:
        """Return installed formulae or casks via `brew list`."""
        result = self._query(["list", category.flag, "-1"])
        return set(result.lines)

    def install(self, category: PackageCategory, identifier: str) -> None:
        """Install a formula or cask via `brew install`."""
        logger.info("Installing %s: %s", category.value, identifier)
        self._mutate(["install", category.flag, identifier])

    def list_outdated(self, category: PackageCategory) -> set[str]:
        """Return outdated formulae or casks via `brew outdated --quiet`."""
        result = self._query(["outdated", category.flag, "--quiet"])
        return set(result.lines)

    def upgrade_all(self, category: PackageCategory) -> None:
        """Upgrade every outdated formula or cask via `brew upgrade`."""
        logger.info("Upgrading all outdated %s", category.plural)
        self._mutate(["upgrade", category.flag])

    def update_metadata(self) -> None:
        """Fetch the latest formula and cask definitions via `brew update`."""
        returncode = run_interactive([self._brew, "update"])
        if returncode != 0:
            msg = f"brew update failed with exit code {returncode}"
            raise MetadataUpdateError(msg)

    def cleanup(self) -> bool:
        """Run `brew cleanup`, reporting failure instead of raising."""
        returncode = run_interactive([self._brew, "cleanup"])
        if returncode != 0:
            logger.warning("brew cleanup exited with code %d", returncode)
            return False
        return True

    def version(self) -> str:
        """Return the first line of `brew --version`."""
        result = self._query(["--version"])
        lines = result.lines
        return lines[0] if lines else "unknown"

    def prefix(self, identifier: str) -> Path:
        """Return the output of `brew --prefix <identifier>`."""
        result = self._query(["--prefix", identifier])
        return Path(result.stdout.strip())

    def _query(self, args: list[str]) -> CommandResult:
        """Run a read-only brew command and capture its output.

        Raises:
            PackageOperationError: If brew exits non-zero.
        """
        command = [self._brew, *args]
        result = run_command(command)
        if not result.success:
            error = result.stderr.strip() or result.stdout.strip() or "brew command failed"
            msg = f"`brew {' '.join(args)}` failed: {error}"
            raise PackageOperationError(msg)
        return result

    def _mutate(self, args: list[str]) -> None:
        """Run a state-changing brew command attached to the terminal.

        Raises:
            PackageOperationError: If brew exits non-zero.
        """
        returncode = run_interactive([self._brew, *args])
        if returncode != 0:
            msg = f"`brew {' '.join(args)}` failed with exit code {returncode}"
            raise PackageOperationError(msg)
