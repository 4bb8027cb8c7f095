"""Shared pytest fixtures for the placeholder client tests."""

import pytest

from placeholder_client.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from a fresh environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
