"""Root pytest configuration for all tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    app_logger = logging.getLogger("wikijs_publisher")
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
