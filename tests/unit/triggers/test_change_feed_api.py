from __future__ import annotations

import pytest
from pydantic import ValidationError

from feedbind.triggers.change_feed import (
    ChangeFeedTriggerAttribute,
    ChangeFeedTriggerRegistration,
    Document,
    ProcessorOptions,
    change_feed_trigger,
    registration_for,
)


def test_change_feed_trigger_attaches_registration_and_returns_function() -> None:
    def handler(docs: list[Document]) -> str:
        return "handled"

    decorated = change_feed_trigger(
        "aDatabase",
        "aCollection",
        connection_string_setting=" CosmosDBConnectionString ",
        lease_collection_name="",
        start_from_beginning=True,
    )(handler)

    assert decorated is handler
    assert decorated([]) == "handled"
    registration = registration_for(decorated)
    assert isinstance(registration, ChangeFeedTriggerRegistration)
    attribute = registration.attribute
    assert attribute.connection_string_setting == "CosmosDBConnectionString"
    assert attribute.lease_collection_name is None
    assert attribute.lease_connection_string_setting is None
    assert attribute.options.start_from_beginning is True
    assert attribute.options.feed_poll_delay_ms == 5000


def test_change_feed_trigger_merges_option_fields_into_options() -> None:
    @change_feed_trigger(
        "aDatabase",
        "aCollection",
        options=ProcessorOptions(max_items_per_invocation=10, lease_collection_prefix="p-"),
        feed_poll_delay_ms=250,
    )
    def handler(docs: list[Document]) -> None: ...

    registration = registration_for(handler)
    assert registration is not None
    assert registration.attribute.options.max_items_per_invocation == 10
    assert registration.attribute.options.lease_collection_prefix == "p-"
    assert registration.attribute.options.feed_poll_delay_ms == 250


def test_registration_for_plain_function_is_none() -> None:
    def handler(docs: list[Document]) -> None: ...

    assert registration_for(handler) is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"database_name": " ", "collection_name": "aCollection"},
        {"database_name": "aDatabase", "collection_name": ""},
        {"database_name": "aDatabase", "collection_name": "c", "options": {"leases_collection_throughput": 100}},
        {"database_name": "aDatabase", "collection_name": "c", "options": {"feed_poll_delay_ms": 0}},
    ],
)
def test_attribute_validation(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        ChangeFeedTriggerAttribute.model_validate(kwargs)


def test_attribute_is_immutable() -> None:
    attribute = ChangeFeedTriggerAttribute(database_name="aDatabase", collection_name="aCollection")
    with pytest.raises(ValidationError):
        attribute.collection_name = "other"  # type: ignore[misc]
