"""Tests for per-category logging levels."""

import logging

import pytest

from valentine_api.config import Settings
from valentine_api.infrastructure.logging.log_config import LOGGER_CATEGORIES, setup_logging


@pytest.fixture(autouse=True)
def _restore_levels():
    names = [""] + [name for _, loggers in LOGGER_CATEGORIES for name in loggers]
    saved = {name: logging.getLogger(name or None).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name or None).setLevel(level)


def test_categories_get_their_own_levels():
    setup_logging(Settings(log_level="WARNING", log_level_http="DEBUG", log_level_sql="ERROR"))

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("valentine_api.presentation").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    # Child loggers inherit from their category.
    gate = logging.getLogger("valentine_api.presentation.middleware.origin_gate")
    assert gate.getEffectiveLevel() == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    setup_logging(Settings(log_level_http="chatty"))
    assert logging.getLogger("valentine_api.presentation").level == logging.INFO
