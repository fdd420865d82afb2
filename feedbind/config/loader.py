"""Locate feedbind.yaml and read its feedbind section."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

CONFIG_PATH_ENV = "FEEDBIND_CONFIG"
SECTION_KEY = "feedbind"
SECTION_KEYS = frozenset({"connection_string", "connection_strings", "settings", "env_file", "triggers"})


class ConfigLoadError(ValueError):
    """Raised when feedbind.yaml cannot be read as a feedbind section."""


class YAMLConfigLoader:
    """Read the feedbind section from feedbind.yaml.

    The section is either the document root or the mapping under a top-level
    ``feedbind:`` key, so the settings can share a file with other tools.
    """

    DEFAULT_FILENAME = "feedbind.yaml"

    @classmethod
    def resolve_path(cls, cli_path: str | None = None) -> Path:
        """Pick the config file: FEEDBIND_CONFIG, then the CLI path, then ./feedbind.yaml."""
        explicit = os.environ.get(CONFIG_PATH_ENV, "").strip() or (cli_path or "").strip()
        if explicit:
            return Path(explicit)
        return Path.cwd() / cls.DEFAULT_FILENAME

    @classmethod
    def load_section(cls, path: str | Path | None = None) -> dict[str, Any]:
        """Return the raw feedbind section; a missing or empty file yields ``{}``."""
        target = Path(path) if path is not None else cls.resolve_path()
        document = _read_yaml(target)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigLoadError(f"Config root must be a mapping, got {type(document).__name__}: {target}")

        section = document.get(SECTION_KEY, document)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigLoadError(f"{SECTION_KEY} section must be a mapping: {target}")

        for key in section:
            if key not in SECTION_KEYS:
                raise ConfigLoadError(f"Unknown key '{key}' in {SECTION_KEY} section: {target}")
        triggers = section.get("triggers")
        if triggers is not None and not isinstance(triggers, list):
            raise ConfigLoadError(f"'triggers' must be a list of trigger entries: {target}")
        return section


def _read_yaml(target: Path) -> Any:
    if not target.is_file():
        return None
    text = target.read_text(encoding="utf-8")
    if not text.strip():
        return None
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = f"{target}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(target)
        raise ConfigLoadError(f"Invalid YAML at {where}") from exc
