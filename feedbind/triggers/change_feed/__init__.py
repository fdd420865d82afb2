"""Change feed trigger binding module."""

from feedbind.triggers.change_feed.api import ChangeFeedTriggerRegistration, change_feed_trigger, registration_for
from feedbind.triggers.change_feed.binding import (
    ChangeFeedTriggerBinding,
    ChangeFeedTriggerBindingProvider,
    ResolutionContext,
    TriggerBindingDescriptor,
    resolve_binding,
)
from feedbind.triggers.change_feed.config import ChangeFeedTriggerAttribute, ProcessorOptions
from feedbind.triggers.change_feed.connection import (
    ConnectionDescriptor,
    parse_connection_string,
    resolve_connection,
)
from feedbind.triggers.change_feed.documents import (
    Document,
    JsonArray,
    TriggerValueType,
    to_trigger_value,
    trigger_value_type_for,
    try_convert_to_document_list,
)
from feedbind.triggers.change_feed.locations import (
    DEFAULT_LEASE_COLLECTION_NAME,
    CollectionLocation,
    resolve_locations,
)
from feedbind.triggers.change_feed.validation import validate_locations

__all__ = [
    "ChangeFeedTriggerAttribute",
    "ChangeFeedTriggerBinding",
    "ChangeFeedTriggerBindingProvider",
    "ChangeFeedTriggerRegistration",
    "CollectionLocation",
    "ConnectionDescriptor",
    "DEFAULT_LEASE_COLLECTION_NAME",
    "Document",
    "JsonArray",
    "ProcessorOptions",
    "ResolutionContext",
    "TriggerBindingDescriptor",
    "TriggerValueType",
    "change_feed_trigger",
    "parse_connection_string",
    "registration_for",
    "resolve_binding",
    "resolve_connection",
    "resolve_locations",
    "to_trigger_value",
    "trigger_value_type_for",
    "try_convert_to_document_list",
    "validate_locations",
]
