"""Configuration models for feedbind."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TriggerEntryConfig(BaseModel):
    """One named change feed trigger declared in feedbind.yaml."""

    name: str
    value_type: Literal["document_list", "generic_array"] = "document_list"
    attribute: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("must be non-empty")
        return normalized


class FeedBindConfig(BaseSettings):
    """Root configuration model for feedbind."""

    connection_string: str | None = Field(
        default=None,
        description="Ambient connection string used when no explicit setting resolves.",
    )
    connection_strings: dict[str, str] = Field(default_factory=dict)
    settings: dict[str, str] = Field(default_factory=dict)
    env_file: str | None = None
    triggers: list[TriggerEntryConfig] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="FEEDBIND_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def trigger(self, name: str) -> TriggerEntryConfig | None:
        """Return the trigger entry with the given name, if declared."""
        for entry in self.triggers:
            if entry.name == name:
                return entry
        return None
