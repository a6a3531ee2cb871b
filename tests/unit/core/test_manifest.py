"""Unit tests for manifest loading.

Tests for resolving and loading manifest files.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from brewctl.core.manifest import (
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestValidationError,
    get_bundled_manifest_path,
    load_manifest,
    resolve_manifest_path,
)


class TestResolveManifestPath:
    """Tests for resolve_manifest_path."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        """An explicit path is used even if it does not exist."""
        explicit = tmp_path / "missing.toml"
        assert resolve_manifest_path(explicit) == explicit

    def test_user_manifest(self, tmp_path: Path) -> None:
        """The user manifest is used when present."""
        user_manifest = tmp_path / "brewctl" / "manifest.toml"
        user_manifest.parent.mkdir()
        user_manifest.write_text("")

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert resolve_manifest_path() == user_manifest

    def test_bundled_fallback(self, tmp_path: Path) -> None:
        """Without a user manifest the bundled default is used."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert resolve_manifest_path() == get_bundled_manifest_path()


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_load_valid(self, manifest_file: Path) -> None:
        """A valid manifest is loaded in declaration order."""
        manifest = load_manifest(manifest_file)

        assert manifest.packages.formulae == ("foo",)
        assert manifest.packages.casks == ("bar-app", "baz-app")
        assert manifest.python is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """An explicit missing path raises ManifestNotFoundError."""
        with pytest.raises(ManifestNotFoundError, match="not found") as exc_info:
            load_manifest(tmp_path / "nope.toml")

        assert exc_info.value.exit_code == 1

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ManifestParseError."""
        path = tmp_path / "manifest.toml"
        path.write_text("[packages\nformulae = [")

        with pytest.raises(ManifestParseError, match="Invalid TOML"):
            load_manifest(path)

    def test_non_utf8_manifest(self, tmp_path: Path) -> None:
        """A manifest that is not UTF-8 raises ManifestParseError."""
        path = tmp_path / "manifest.toml"
        path.write_bytes(b'[packages]\nformulae = ["caf\xe9"]\n')

        with pytest.raises(ManifestParseError, match="not valid UTF-8") as exc_info:
            load_manifest(path)

        assert exc_info.value.exit_code == 1

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ManifestValidationError."""
        path = tmp_path / "manifest.toml"
        path.write_text('[packages]\nformulae = "git"\nbrews = []\n')

        with pytest.raises(ManifestValidationError, match="Invalid manifest"):
            load_manifest(path)

    def test_errors_share_base(self) -> None:
        """All manifest errors derive from ManifestError."""
        for error in (ManifestNotFoundError, ManifestParseError, ManifestValidationError):
            assert issubclass(error, ManifestError)

    def test_bundled_default_is_valid(self) -> None:
        """The bundled manifest loads and names the Python formula."""
        manifest = load_manifest(get_bundled_manifest_path())

        assert "python@3.13" in manifest.packages.formulae
        assert "tailscale" in manifest.packages.casks
        assert manifest.python is not None
        assert manifest.python.formula == "python@3.13"
