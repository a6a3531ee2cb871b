"""Manifest models for the declared package set.

This module defines the Pydantic models representing the manifest.toml
structure that lists the formulae and casks that should be installed.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from brewctl.models.package import PackageCategory


class ManifestMeta(BaseModel):
    """Metadata section of the manifest.

    Attributes:
        version: Manifest schema version (e.g., "1.0").
    """

    model_config = ConfigDict(extra="forbid")

    version: Annotated[str, Field(description="Manifest schema version")] = "1.0"


class PackageConfig(BaseModel):
    """Package section of the manifest.

    Identifiers are kept in declaration order. Duplicates are allowed and
    only result in redundant checks.

    Attributes:
        formulae: Formulae (command-line tools and libraries) to install.
        casks: Casks (GUI applications) to install.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    formulae: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Formulae to install"),
    ]
    casks: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Casks to install"),
    ]

    @field_validator("formulae", "casks", mode="after")
    @classmethod
    def validate_identifiers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Strip identifiers and reject blank ones."""
        cleaned = tuple(identifier.strip() for identifier in value)
        if any(not identifier for identifier in cleaned):
            msg = "Package identifiers cannot be empty"
            raise ValueError(msg)
        return cleaned

    def for_category(self, category: PackageCategory) -> tuple[str, ...]:
        """Return the declared identifiers for a category."""
        if category is PackageCategory.FORMULA:
            return self.formulae
        return self.casks


class PythonConfig(BaseModel):
    """Optional Python section of the manifest.

    Attributes:
        formula: Homebrew Python formula to report on after installing.
    """

    model_config = ConfigDict(extra="forbid")

    formula: Annotated[str, Field(min_length=1, description="Python formula name")]


class Manifest(BaseModel):
    """Complete manifest describing the desired Homebrew packages.

    Attributes:
        meta: Metadata section with the schema version.
        packages: Declared formulae and casks.
        python: Optional Python formula for the post-install note.
    """

    model_config = ConfigDict(extra="forbid")

    meta: Annotated[ManifestMeta, Field(default_factory=ManifestMeta)]
    packages: Annotated[PackageConfig, Field(default_factory=PackageConfig)]
    python: PythonConfig | None = None
