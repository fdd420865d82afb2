"""Name resolution and ambient setting lookup for trigger bindings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from feedbind.exceptions import ConfigurationError

if TYPE_CHECKING:
    from feedbind.config.models import FeedBindConfig

logger = logging.getLogger(__name__)

DEFAULT_CONNECTION_SETTING = "AzureWebJobsCosmosDBConnectionString"


@runtime_checkable
class NameResolver(Protocol):
    """Host-supplied lookup from a setting name to its value."""

    def resolve(self, name: str) -> str | None: ...


@runtime_checkable
class ConfigurationStore(Protocol):
    """Fallback store consulted when the name resolver has no value."""

    def get(self, key: str) -> str | None: ...


class StaticNameResolver:
    """Resolve names from a fixed mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def resolve(self, name: str) -> str | None:
        return self.values.get(name) or None


class EnvironmentNameResolver:
    """Resolve names from the process environment, a .env file and app settings."""

    def __init__(self, env_file: Path | None = None, settings: Mapping[str, str] | None = None) -> None:
        self._settings = dict(settings or {})
        self._env_file_values = read_env_file(Path(env_file)) if env_file else {}

    def resolve(self, name: str) -> str | None:
        for source in (os.environ, self._env_file_values, self._settings):
            value = source.get(name)
            if value:
                return value
        return None


def read_env_file(path: Path) -> dict[str, str]:
    """Read ``NAME=value`` settings from a dotenv-style file.

    Connection strings contain ``=`` and ``;``, so the value is everything after
    the first ``=`` and only a matching pair of surrounding quotes is removed.
    """
    if not path.is_file():
        logger.debug("Settings file %s not found", path)
        return {}
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        entry = line.strip()
        if entry.startswith("export "):
            entry = entry[len("export ") :].lstrip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        name, value = (part.strip() for part in entry.split("=", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        if name:
            values[name] = value
    logger.debug("Read %d setting name(s) from %s", len(values), path)
    return values


class SettingsStore:
    """Connection-strings store backed by the loaded feedbind configuration."""

    def __init__(self, config: FeedBindConfig) -> None:
        self._config = config

    def get(self, key: str) -> str | None:
        value = self._config.connection_strings.get(key)
        if value:
            return value
        if key == DEFAULT_CONNECTION_SETTING:
            return self._config.connection_string or None
        return None


def strip_placeholder(value: str) -> tuple[str, bool]:
    """Return the name inside a ``%name%`` wrapper and whether it was wrapped."""
    stripped = value.strip()
    if len(stripped) > 2 and stripped.startswith("%") and stripped.endswith("%"):
        return stripped[1:-1], True
    return stripped, False


def resolve_placeholder(value: str, resolver: NameResolver) -> str:
    """Substitute a ``%name%`` value through the resolver; literals pass through."""
    name, wrapped = strip_placeholder(value)
    if not wrapped:
        return value
    resolved = resolver.resolve(name)
    if not resolved:
        logger.warning("Unresolved placeholder %%%s%%", name)
        raise ConfigurationError(name, f"Unable to resolve setting '{name}' for placeholder '{value}'")
    return resolved
