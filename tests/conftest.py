"""Shared test configuration."""

import pytest

from lifemanager.config import AuthSettings, StorageSettings, get_settings
from lifemanager.services.storage import InMemoryBlobStorage


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in (
        "LIFEMANAGER_STORAGE_BACKEND",
        "LIFEMANAGER_STORAGE_DATA_DIR",
        "LIFEMANAGER_STORAGE_KEY_PREFIX",
        "LIFEMANAGER_STORAGE_CORRUPT_BLOB_POLICY",
        "LIFEMANAGER_STORAGE_SIMULATE_LATENCY",
        "LIFEMANAGER_AUTH_DEV_AUTO_LOGIN_EMAIL",
        "LIFEMANAGER_AUTH_DISPLAY_NAME",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage():
    return InMemoryBlobStorage()


@pytest.fixture
def storage_settings():
    return StorageSettings(simulate_latency=False, corrupt_blob_policy="raise")


@pytest.fixture
def lenient_settings():
    return StorageSettings(simulate_latency=False, corrupt_blob_policy="empty")


@pytest.fixture
def auth_settings():
    return AuthSettings()
