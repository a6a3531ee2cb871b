"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from fakes import FakePackageManager


@pytest.fixture
def make_manager() -> Callable[..., FakePackageManager]:
    """Factory for recording package managers."""
    return FakePackageManager


@pytest.fixture
def fake_manager() -> FakePackageManager:
    """Recording package manager with nothing installed."""
    return FakePackageManager()


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """A small manifest with one formula and two casks."""
    path = tmp_path / "manifest.toml"
    path.write_text(
        """
[meta]
version = "1.0"

[packages]
formulae = ["foo"]
casks = ["bar-app", "baz-app"]
""".lstrip()
    )
    return path
