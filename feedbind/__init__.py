"""Change feed trigger binding resolution for document databases."""

from feedbind.config import EnvironmentNameResolver, SettingsStore, StaticNameResolver, load_config
from feedbind.exceptions import BindingError, ConfigurationError, InvalidOperationError
from feedbind.triggers.change_feed import (
    ChangeFeedTriggerAttribute,
    ChangeFeedTriggerBinding,
    ChangeFeedTriggerBindingProvider,
    CollectionLocation,
    ConnectionDescriptor,
    Document,
    ProcessorOptions,
    ResolutionContext,
    TriggerBindingDescriptor,
    TriggerValueType,
    change_feed_trigger,
    resolve_binding,
    try_convert_to_document_list,
)

__all__ = [
    "BindingError",
    "ChangeFeedTriggerAttribute",
    "ChangeFeedTriggerBinding",
    "ChangeFeedTriggerBindingProvider",
    "CollectionLocation",
    "ConfigurationError",
    "ConnectionDescriptor",
    "Document",
    "EnvironmentNameResolver",
    "InvalidOperationError",
    "ProcessorOptions",
    "ResolutionContext",
    "SettingsStore",
    "StaticNameResolver",
    "TriggerBindingDescriptor",
    "TriggerValueType",
    "change_feed_trigger",
    "load_config",
    "resolve_binding",
    "try_convert_to_document_list",
]
