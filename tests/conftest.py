"""
Pytest configuration and fixtures for ff-pretty-logger tests.
"""

import io

import pytest
from ff_pretty_logger.config import reset_config


@pytest.fixture
def stream():
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def clean_config():
    """Restore the global configuration after each test."""
    yield
    reset_config()
