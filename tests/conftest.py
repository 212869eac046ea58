# tests/conftest.py

"""Shared pytest fixtures for all genprobe tests."""

from collections.abc import Generator

import pytest

from genprobe.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop the cached Settings so env changes in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
