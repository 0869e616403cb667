"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest
from _pytest.logging import LogCaptureHandler

from bookshelf.app.core.config import Settings
from bookshelf.app.core.logging_config import setup_logging


class TestSettings:
    def test_cors_origin_list_splits_and_strips(self) -> None:
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origin_list() == ["http://a.test", "http://b.test"]

    def test_wildcard_origin(self) -> None:
        assert Settings(cors_origins="*").cors_origin_list() == ["*"]


@pytest.fixture
def root_logger():
    """Root logger whose handlers and level are restored after the test.

    pytest attaches its capture handlers to the root logger for each
    test phase, so tests call ``clear_handlers`` in their body.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers and not isinstance(handler, LogCaptureHandler):
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def clear_handlers(root: logging.Logger) -> None:
    root.handlers = []


class TestSetupLogging:
    def test_console_and_file_handlers(self, root_logger: logging.Logger, tmp_path: Path) -> None:
        clear_handlers(root_logger)
        logfile = tmp_path / "logs" / "bookshelf.log"

        setup_logging("debug", str(logfile))

        assert root_logger.level == logging.DEBUG
        assert [type(h) for h in root_logger.handlers] == [logging.StreamHandler, logging.FileHandler]
        assert logfile.exists()

    def test_configures_only_once(self, root_logger: logging.Logger) -> None:
        clear_handlers(root_logger)

        setup_logging("INFO")
        setup_logging("DEBUG")

        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self, root_logger: logging.Logger) -> None:
        clear_handlers(root_logger)
        setup_logging("chatty")
        assert root_logger.level == logging.INFO

    def test_skips_when_already_configured(self, root_logger: logging.Logger) -> None:
        clear_handlers(root_logger)
        existing = logging.NullHandler()
        root_logger.addHandler(existing)

        setup_logging("DEBUG")

        assert root_logger.handlers == [existing]
