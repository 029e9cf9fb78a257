"""Tests for setup_logging."""

import logging

import pytest

from nativeplane.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("nativeplane")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self, package_logger):
        setup_logging(logging.DEBUG)

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_repeated_calls_do_not_duplicate(self, package_logger):
        setup_logging()
        setup_logging()

        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "nativeplane.log"

        setup_logging(logging.INFO, str(log_file))
        logging.getLogger("nativeplane.tools").info("hello")
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "nativeplane.tools - INFO - hello" in text
