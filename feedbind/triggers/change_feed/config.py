"""Configuration models for change feed trigger bindings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProcessorOptions(BaseModel):
    """Options handed to the change feed processor that owns the lease collection."""

    model_config = ConfigDict(frozen=True)

    lease_collection_prefix: str | None = None
    feed_poll_delay_ms: int = Field(default=5000, ge=1)
    lease_acquire_interval_ms: int = Field(default=13000, ge=1)
    lease_expiration_interval_ms: int = Field(default=60000, ge=1)
    lease_renew_interval_ms: int = Field(default=17000, ge=1)
    checkpoint_interval_ms: int | None = Field(default=None, ge=1)
    checkpoint_document_count: int | None = Field(default=None, ge=1)
    max_items_per_invocation: int | None = Field(default=None, ge=1)
    start_from_beginning: bool = False
    create_lease_collection_if_not_exists: bool = False
    leases_collection_throughput: int | None = Field(default=None, ge=400)


class ChangeFeedTriggerAttribute(BaseModel):
    """Declarative description of one change feed trigger binding."""

    model_config = ConfigDict(frozen=True)

    database_name: str
    collection_name: str
    connection_string_setting: str | None = None
    lease_connection_string_setting: str | None = None
    lease_database_name: str | None = None
    lease_collection_name: str | None = None
    options: ProcessorOptions = Field(default_factory=ProcessorOptions)

    @field_validator("database_name", "collection_name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("must be non-empty")
        return normalized

    @field_validator(
        "connection_string_setting",
        "lease_connection_string_setting",
        "lease_database_name",
        "lease_collection_name",
    )
    @classmethod
    def _blank_as_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        return normalized or None
