"""Tests for logging configuration."""

import logging

import pytest

from superrifas.log_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("superrifas")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_sets_level_by_name():
    logger = setup_logging("debug")
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert setup_logging("VERBOSE").level == logging.INFO


def test_no_duplicate_handlers():
    setup_logging()
    logger = setup_logging(logging.WARNING)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
