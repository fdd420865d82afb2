"""Shared test fixtures for feedbind."""

from __future__ import annotations

import os

import pytest

from feedbind.config import DEFAULT_CONNECTION_SETTING, FeedBindConfig, SettingsStore, StaticNameResolver

ENVIRONMENT_CONNECTION = "AccountEndpoint=https://fromEnvironment;AccountKey=someKey;"
SETTINGS_CONNECTION = "AccountEndpoint=https://fromSettings;AccountKey=someKey;"
LEASE_CONNECTION = "AccountEndpoint=https://fromSettingsLease;AccountKey=someKey;"
STORE_CONNECTION = "AccountEndpoint=https://someuri;AccountKey=c29tZV9rZXk=;"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient FEEDBIND_* and connection variables out of unit tests."""
    for key in list(os.environ):
        if key.startswith("FEEDBIND_") or key == DEFAULT_CONNECTION_SETTING:
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def name_resolver() -> StaticNameResolver:
    """Resolver holding both an environment-level and an app-setting-level connection."""
    return StaticNameResolver(
        {
            DEFAULT_CONNECTION_SETTING: ENVIRONMENT_CONNECTION,
            "CosmosDBConnectionString": SETTINGS_CONNECTION,
        }
    )


@pytest.fixture
def settings_store() -> SettingsStore:
    return SettingsStore(FeedBindConfig(connection_string=STORE_CONNECTION))
