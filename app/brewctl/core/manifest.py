"""Manifest file loading.

This module resolves which manifest to use and loads it from TOML with
validation using Pydantic models.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from brewctl.core.errors import BrewctlError, ExitCode
from brewctl.core.paths import get_manifest_path
from brewctl.models.manifest import Manifest

logger = logging.getLogger(__name__)


class ManifestError(BrewctlError):
    """Base exception for manifest-related errors."""

    exit_code = ExitCode.INVALID_ARGUMENT


class ManifestNotFoundError(ManifestError):
    """Raised when manifest file is not found."""


class ManifestParseError(ManifestError):
    """Raised when manifest file cannot be parsed."""


class ManifestValidationError(ManifestError):
    """Raised when manifest content is invalid."""


def get_bundled_manifest_path() -> Path:
    """Get the bundled default manifest path.

    Returns:
        Path to the bundled data/manifest.toml.
    """
    return Path(str(resources.files("brewctl.data").joinpath("manifest.toml")))


def resolve_manifest_path(path: Path | None = None) -> Path:
    """Pick the manifest to load.

    Priority:
    1. Explicit path (CLI option or BREWCTL_MANIFEST)
    2. User manifest (~/.config/brewctl/manifest.toml)
    3. Bundled default manifest

    Args:
        path: Explicitly requested manifest path, if any.

    Returns:
        Path of the manifest to load.
    """
    if path is not None:
        return path

    user_path = get_manifest_path()
    if user_path.exists():
        return user_path

    logger.debug("No manifest at %s, using bundled default", user_path)
    return get_bundled_manifest_path()


def load_manifest(path: Path | None = None) -> Manifest:
    """Load and validate a manifest from a TOML file.

    Args:
        path: Path to the manifest file. If None, the path is resolved
            with :func:`resolve_manifest_path`.

    Returns:
        Validated Manifest object.

    Raises:
        ManifestNotFoundError: If the manifest file doesn't exist.
        ManifestParseError: If the TOML syntax is invalid.
        ManifestValidationError: If the content doesn't match the schema.
    """
    manifest_path = resolve_manifest_path(path)

    if not manifest_path.exists():
        raise ManifestNotFoundError(f"Manifest not found: {manifest_path}")

    try:
        with open(manifest_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Invalid TOML syntax in {manifest_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"Manifest is not valid UTF-8 ({manifest_path}): {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read manifest: {e}") from e

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestValidationError(f"Invalid manifest content: {e}") from e

    logger.debug(
        "Loaded manifest %s (%d formulae, %d casks)",
        manifest_path,
        len(manifest.packages.formulae),
        len(manifest.packages.casks),
    )
    return manifest
