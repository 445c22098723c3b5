"""Shared pytest fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo configure_logging() so loggers never hold a previous test's captured stream."""
    yield
    structlog.reset_defaults()
