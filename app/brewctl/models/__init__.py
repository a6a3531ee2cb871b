"""Data models for brewctl.

This module exports the core data structures used throughout the application.
"""

from brewctl.models.manifest import Manifest, ManifestMeta, PackageConfig, PythonConfig
from brewctl.models.outcome import InstallOutcome, InstallResult, UpgradeOutcome, UpgradeResult
from brewctl.models.package import PackageCategory

__all__ = [
    "InstallOutcome",
    "InstallResult",
    "Manifest",
    "ManifestMeta",
    "PackageCategory",
    "PackageConfig",
    "PythonConfig",
    "UpgradeOutcome",
    "UpgradeResult",
]
