"""Tests for logging configuration."""

import logging

import pytest

from meal_plan_engine.app_logging import configure_logging


@pytest.fixture
def engine_logger():
    logger = logging.getLogger("meal_plan_engine")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_configure_logging_idempotent(engine_logger: logging.Logger) -> None:
    configure_logging()
    first_count = len(engine_logger.handlers)

    configure_logging()
    second_count = len(engine_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert engine_logger.propagate is False


def test_configure_logging_sets_level(engine_logger: logging.Logger) -> None:
    configure_logging("debug")

    assert engine_logger.level == logging.DEBUG
