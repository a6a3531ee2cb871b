"""Error taxonomy and process exit codes.

Every failure that aborts a run is a BrewctlError carrying the exit code
the CLI terminates with. None of them are retried.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes shared by both entry points."""

    SUCCESS = 0
    PLATFORM_UNSUPPORTED = 1
    INVALID_ARGUMENT = 1
    TOOLCHAIN_UNAVAILABLE = 2
    METADATA_UPDATE_FAILED = 3
    PACKAGE_OPERATION_FAILED = 4


class BrewctlError(Exception):
    """Base exception for errors that terminate a run."""

    exit_code: ExitCode = ExitCode.INVALID_ARGUMENT


class PlatformUnsupportedError(BrewctlError):
    """Raised when the host operating system is not macOS."""

    exit_code = ExitCode.PLATFORM_UNSUPPORTED


class ToolchainMissingError(BrewctlError):
    """Raised when Homebrew is not installed and installing it was not requested."""

    exit_code = ExitCode.TOOLCHAIN_UNAVAILABLE


class ToolchainInstallError(BrewctlError):
    """Raised when the Homebrew bootstrap fails or brew is still unreachable."""

    exit_code = ExitCode.TOOLCHAIN_UNAVAILABLE


class MetadataUpdateError(BrewctlError):
    """Raised when `brew update` fails."""

    exit_code = ExitCode.METADATA_UPDATE_FAILED


class PackageOperationError(BrewctlError):
    """Raised when a brew query, install or upgrade command fails."""

    exit_code = ExitCode.PACKAGE_OPERATION_FAILED
