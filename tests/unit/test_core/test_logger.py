"""Tests for logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from classpath_infer.core.config.settings import LoggingSettings
from classpath_infer.core.logger.logger import get_console, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_handler(self) -> None:
        setup_logging(LoggingSettings(level="DEBUG", use_rich=True))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_plain_handler(self) -> None:
        setup_logging(LoggingSettings(level="WARNING", use_rich=False))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert type(root.handlers[0]) is logging.StreamHandler

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "infer.log"
        setup_logging(LoggingSettings(use_rich=False, file=log_file))

        logging.getLogger("classpath_infer.test").info("resolved 3 jars")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "resolved 3 jars" in log_file.read_text(encoding="utf-8")


def test_get_logger_returns_same_instance() -> None:
    assert get_logger("classpath_infer.sample") is get_logger("classpath_infer.sample")


def test_get_console() -> None:
    assert get_console() is get_console()
