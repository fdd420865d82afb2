"""Public registration APIs for change feed triggers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from feedbind.triggers.change_feed.config import ChangeFeedTriggerAttribute, ProcessorOptions

REGISTRATION_ATTR = "__change_feed_trigger__"

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(slots=True)
class ChangeFeedTriggerRegistration:
    """Normalized registration payload attached by change_feed_trigger(...)."""

    attribute: ChangeFeedTriggerAttribute


def change_feed_trigger(
    database_name: str,
    collection_name: str,
    *,
    connection_string_setting: str | None = None,
    lease_connection_string_setting: str | None = None,
    lease_database_name: str | None = None,
    lease_collection_name: str | None = None,
    options: ProcessorOptions | None = None,
    **option_fields: Any,
) -> Callable[[F], F]:
    """Declare a change feed trigger on the decorated function's first parameter."""
    if options is None:
        options = ProcessorOptions(**option_fields)
    elif option_fields:
        options = options.model_copy(update=ProcessorOptions(**option_fields).model_dump(exclude_unset=True))
    attribute = ChangeFeedTriggerAttribute(
        database_name=database_name,
        collection_name=collection_name,
        connection_string_setting=connection_string_setting,
        lease_connection_string_setting=lease_connection_string_setting,
        lease_database_name=lease_database_name,
        lease_collection_name=lease_collection_name,
        options=options,
    )

    def _decorate(func: F) -> F:
        setattr(func, REGISTRATION_ATTR, ChangeFeedTriggerRegistration(attribute=attribute))
        return func

    return _decorate


def registration_for(func: Callable[..., Any]) -> ChangeFeedTriggerRegistration | None:
    """Return the registration attached to ``func``, if any."""
    registration = getattr(func, REGISTRATION_ATTR, None)
    if isinstance(registration, ChangeFeedTriggerRegistration):
        return registration
    return None
