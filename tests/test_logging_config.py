"""Tests for slitdiffraction.logging_config."""

import logging

import pytest

from slitdiffraction.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_setup_logging_is_repeatable(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_setup_logging_to_file(package_logger, tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger(f"{PACKAGE_LOGGER}.model").debug("recompute")
    for handler in package_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in content
    assert "slitdiffraction.model - DEBUG - recompute" in content
