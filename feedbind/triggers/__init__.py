"""Event triggers."""

from feedbind.triggers.change_feed import (
    ChangeFeedTriggerAttribute,
    ChangeFeedTriggerBindingProvider,
    TriggerBindingDescriptor,
    change_feed_trigger,
)

__all__ = [
    "ChangeFeedTriggerAttribute",
    "ChangeFeedTriggerBindingProvider",
    "TriggerBindingDescriptor",
    "change_feed_trigger",
]
