"""Shared pytest fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks bound to per-test capture streams after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
