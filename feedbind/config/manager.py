"""Layered configuration loading for feedbind."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from feedbind.config.loader import CONFIG_PATH_ENV, YAMLConfigLoader
from feedbind.config.models import FeedBindConfig

logger = logging.getLogger(__name__)

_ENV_PREFIX = "FEEDBIND_"
# Consumed by YAMLConfigLoader.resolve_path, not a config field.
_RESERVED_ENV = {CONFIG_PATH_ENV}


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in updates.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _coerce_env_value(raw: str) -> Any:
    value = raw.strip()
    if value.startswith("[") or value.startswith("{"):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def _collect_env_overrides(prefix: str = _ENV_PREFIX) -> dict[str, Any]:
    """Map FEEDBIND_A__B=value to {"a": {"b": value}}.

    Keys below ``connection_strings`` and ``settings`` keep their case since
    they are setting names.
    """
    overrides: dict[str, Any] = {}
    for key, raw_value in os.environ.items():
        if not key.startswith(prefix) or key in _RESERVED_ENV:
            continue
        suffix = key[len(prefix) :]
        parts = [p.strip() for p in suffix.split("__") if p.strip()]
        if not parts:
            continue
        head = parts[0].lower()
        path = [head] + (parts[1:] if head in {"connection_strings", "settings"} else [p.lower() for p in parts[1:]])
        cursor = overrides
        for part in path[:-1]:
            existing = cursor.get(part)
            if not isinstance(existing, dict):
                existing = {}
                cursor[part] = existing
            cursor = existing
        cursor[path[-1]] = _coerce_env_value(raw_value)
    return overrides


def load_config(
    config_path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> FeedBindConfig:
    """Load configuration from defaults + YAML + FEEDBIND_* env + runtime overrides."""
    target = YAMLConfigLoader.resolve_path(config_path)
    section = YAMLConfigLoader.load_section(target)
    merged = _deep_merge(section, _collect_env_overrides())
    merged = _deep_merge(merged, overrides or {})
    logger.debug("Loaded feedbind config from %s (%d trigger entries)", target, len(merged.get("triggers") or []))
    return FeedBindConfig.model_validate(merged)
