"""Layered configuration and name resolution for feedbind."""

from feedbind.config.loader import ConfigLoadError, YAMLConfigLoader
from feedbind.config.manager import load_config
from feedbind.config.models import FeedBindConfig, TriggerEntryConfig
from feedbind.config.names import (
    DEFAULT_CONNECTION_SETTING,
    ConfigurationStore,
    EnvironmentNameResolver,
    NameResolver,
    SettingsStore,
    StaticNameResolver,
    resolve_placeholder,
    strip_placeholder,
)

__all__ = [
    "ConfigLoadError",
    "ConfigurationStore",
    "DEFAULT_CONNECTION_SETTING",
    "EnvironmentNameResolver",
    "FeedBindConfig",
    "NameResolver",
    "SettingsStore",
    "StaticNameResolver",
    "TriggerEntryConfig",
    "YAMLConfigLoader",
    "load_config",
    "resolve_placeholder",
    "strip_placeholder",
]
