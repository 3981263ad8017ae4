"""Shared fixtures."""

import pytest

from fallible.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset global settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
