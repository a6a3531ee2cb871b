"""Environment preflight: platform check and Homebrew bootstrap.

Verifies the host is macOS and that a brew executable is reachable,
installing Homebrew once with the official installer when requested.
"""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from brewctl.core.errors import (
    PlatformUnsupportedError,
    ToolchainInstallError,
    ToolchainMissingError,
)
from brewctl.utils.shell import run_command, run_interactive, which

logger = logging.getLogger(__name__)

SUPPORTED_SYSTEM = "Darwin"

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"


class Architecture(Enum):
    """CPU architectures with a known Homebrew install prefix."""

    ARM64 = "arm64"
    X86_64 = "x86_64"

    @classmethod
    def from_machine(cls, machine: str) -> Architecture:
        """Map a `platform.machine()` string to an Architecture.

        Anything that is not Apple Silicon resolves to the Intel prefix.
        """
        if machine.lower() in ("arm64", "aarch64"):
            return cls.ARM64
        return cls.X86_64


HOMEBREW_PREFIXES: dict[Architecture, Path] = {
    Architecture.ARM64: Path("/opt/homebrew"),
    Architecture.X86_64: Path("/usr/local"),
}


@dataclass(frozen=True, slots=True)
class ToolchainHandle:
    """A located brew executable.

    Attributes:
        brew: Absolute path to the brew executable.
        architecture: Host CPU architecture.
        freshly_installed: True if Homebrew was installed during this run.
    """

    brew: Path
    architecture: Architecture
    freshly_installed: bool = False

    @property
    def shellenv_hint(self) -> str:
        """Line to add to a shell profile so future shells find brew."""
        prefix = HOMEBREW_PREFIXES[self.architecture]
        return f'eval "$({prefix}/bin/brew shellenv)"'


def detect_architecture() -> Architecture:
    """Detect the host CPU architecture."""
    return Architecture.from_machine(platform.machine())


def verify_platform() -> str:
    """Ensure the host is macOS.

    Returns:
        The macOS product version, or "unknown" if it cannot be read.

    Raises:
        PlatformUnsupportedError: If the host is not macOS.
    """
    system = platform.system()
    if system != SUPPORTED_SYSTEM:
        msg = f"This tool is intended for macOS only. Detected OS: {system or 'unknown'}"
        raise PlatformUnsupportedError(msg)
    return platform.mac_ver()[0] or "unknown"


def locate_brew(architecture: Architecture) -> Path | None:
    """Find the brew executable on PATH or under the architecture's prefix.

    Args:
        architecture: Host architecture, selecting the known prefix.

    Returns:
        Path to brew, or None if it cannot be found.
    """
    on_path = which("brew")
    if on_path:
        return Path(on_path)

    candidate = HOMEBREW_PREFIXES[architecture] / "bin" / "brew"
    if candidate.is_file() and os.access(candidate, os.X_OK):
        logger.debug("brew not on PATH, found at %s", candidate)
        return candidate
    return None


def install_homebrew() -> None:
    """Download and run the official Homebrew installer once.

    Raises:
        ToolchainInstallError: If the download or the installer fails.
    """
    try:
        download = run_command(["curl", "-fsSL", HOMEBREW_INSTALL_URL])
    except FileNotFoundError as e:
        msg = "curl is not available to download the Homebrew installer"
        raise ToolchainInstallError(msg) from e

    if not download.success or not download.stdout.strip():
        msg = (
            "Failed to download the Homebrew installer. "
            "Check your internet connection and try again."
        )
        raise ToolchainInstallError(msg)

    # The installer requires bash and may prompt for a sudo password
    returncode = run_interactive(["/bin/bash", "-c", download.stdout])
    if returncode != 0:
        msg = "Homebrew installation failed. Check your internet connection and try again."
        raise ToolchainInstallError(msg)


def verify_or_install_toolchain(*, install: bool = True) -> ToolchainHandle:
    """Locate brew, installing Homebrew once if allowed.

    Args:
        install: Whether to bootstrap Homebrew when it is missing.

    Returns:
        ToolchainHandle for the located brew executable.

    Raises:
        ToolchainMissingError: If brew is missing and install is False.
        ToolchainInstallError: If installing fails or brew is still unreachable.
    """
    architecture = detect_architecture()
    brew = locate_brew(architecture)
    if brew is not None:
        return ToolchainHandle(brew=brew, architecture=architecture)

    if not install:
        msg = "Homebrew is not installed or not on PATH. Run brewctl-update first to install it."
        raise ToolchainMissingError(msg)

    logger.info("Homebrew not found, running the official installer")
    install_homebrew()

    brew = locate_brew(architecture)
    if brew is None:
        msg = (
            "Homebrew was installed but 'brew' is still not found. "
            "You may need to restart your shell."
        )
        raise ToolchainInstallError(msg)

    return ToolchainHandle(brew=brew, architecture=architecture, freshly_installed=True)
