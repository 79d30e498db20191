"""
Pytest configuration and shared fixtures.
"""

import pytest

from gcs_mount.config import Settings
from gcs_mount.dependencies import reset_singletons


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before each test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def settings():
    """Default settings, isolated from any settings.env on disk."""
    return Settings(_env_file=None)
