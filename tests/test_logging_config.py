"""Tests for the package logger setup."""
import logging

import pytest

from pahvapor.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("pahvapor")
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_level_by_name():
    logger = setup_logging("debug")
    assert logger.name == "pahvapor"
    assert logger.level == logging.DEBUG


def test_repeated_setup_does_not_stack_handlers():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.INFO)
    assert len(logger.handlers) == 1


def test_log_file(tmp_path):
    log_file = tmp_path / "app.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("pahvapor.core.sampling").info("grid built")
    for handler in logger.handlers:
        handler.flush()
    assert "grid built" in log_file.read_text(encoding="utf-8")


def test_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
