"""Pytest configuration and fixtures for dirstage tests."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a CLI invocation installed."""
    yield
    structlog.reset_defaults()
