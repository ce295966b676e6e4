"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides the shared
probability table used across test modules.
"""
import logging

import pytest

from mdarray import list_to_array
from mdarray.config import PACKAGE_LOGGER


# 2 x 3 x 3 conditional probability table P(C | A, B)
PROBABILITY_TABLE = [
    [
        [0.08, 0.16, 0.06],
        [0.10, 0.20, 0.04],
        [0.12, 0.14, 0.10],
    ],
    [
        [0.02, 0.04, 0.04],
        [0.05, 0.03, 0.02],
        [0.10, 0.20, 0.30],
    ],
]


@pytest.fixture
def table_list():
    """Fresh nested-list copy of the probability table."""
    return [[list(row) for row in block] for block in PROBABILITY_TABLE]


@pytest.fixture
def table(table_list):
    """The probability table as an MDA."""
    return list_to_array(table_list)


@pytest.fixture
def package_logger():
    """Package logger, restored to its original handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
