"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """The CLI configures structlog globally; undo it after every test."""
    yield
    structlog.reset_defaults()
