"""Unit tests for logging setup."""

import logging
from collections.abc import Iterator

import pytest
from brewctl.utils.log import configure_logging
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without --verbose only warnings and errors are shown."""
        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        """--verbose enables debug output."""
        configure_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_uses_rich_handler(self) -> None:
        """Records are routed through a single RichHandler."""
        configure_logging()
        configure_logging(verbose=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
