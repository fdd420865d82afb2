"""Assembly of change feed trigger binding descriptors."""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from feedbind.config.names import ConfigurationStore, NameResolver, resolve_placeholder
from feedbind.exceptions import InvalidOperationError
from feedbind.triggers.change_feed.api import registration_for
from feedbind.triggers.change_feed.config import ChangeFeedTriggerAttribute, ProcessorOptions
from feedbind.triggers.change_feed.documents import (
    TriggerValueType,
    to_trigger_value,
    trigger_value_type_for,
    try_convert_to_document_list,
)
from feedbind.triggers.change_feed.locations import CollectionLocation, resolve_locations
from feedbind.triggers.change_feed.validation import validate_locations

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Inputs of one binding resolution."""

    attribute: ChangeFeedTriggerAttribute
    name_resolver: NameResolver
    store: ConfigurationStore


class TriggerBindingDescriptor(BaseModel):
    """Fully resolved identity and shape of a change feed trigger binding."""

    model_config = ConfigDict(frozen=True)

    monitored_location: CollectionLocation
    lease_location: CollectionLocation
    trigger_value_type: TriggerValueType
    processor_options: ProcessorOptions = Field(default_factory=ProcessorOptions)


def _resolve_options(options: ProcessorOptions, resolver: NameResolver) -> ProcessorOptions:
    if not options.lease_collection_prefix:
        return options
    prefix = resolve_placeholder(options.lease_collection_prefix, resolver)
    return options.model_copy(update={"lease_collection_prefix": prefix})


def resolve_binding(context: ResolutionContext, parameter_type: Any) -> TriggerBindingDescriptor:
    """Resolve, validate and assemble the descriptor for one bound parameter.

    Errors from resolution and validation propagate unchanged; no partial
    descriptor is ever returned.
    """
    monitored, lease = resolve_locations(context.attribute, context.name_resolver, context.store)
    validate_locations(monitored, lease)
    value_type = trigger_value_type_for(parameter_type)
    return TriggerBindingDescriptor(
        monitored_location=monitored,
        lease_location=lease,
        trigger_value_type=value_type,
        processor_options=_resolve_options(context.attribute.options, context.name_resolver),
    )


@dataclass(frozen=True, slots=True)
class ChangeFeedTriggerBinding:
    """A created binding: the descriptor plus payload conversion for invocations."""

    descriptor: TriggerBindingDescriptor

    @property
    def trigger_value_type(self) -> TriggerValueType:
        return self.descriptor.trigger_value_type

    @property
    def monitored_location(self) -> CollectionLocation:
        return self.descriptor.monitored_location

    @property
    def lease_location(self) -> CollectionLocation:
        return self.descriptor.lease_location

    def convert(self, payload: Any) -> tuple[Any, bool]:
        """Normalize a delivered payload into the declared value shape."""
        documents, ok = try_convert_to_document_list(payload)
        if not ok or documents is None:
            return None, False
        return to_trigger_value(documents, self.trigger_value_type), True


class ChangeFeedTriggerBindingProvider:
    """Create change feed trigger bindings from attributes or decorated functions."""

    def __init__(self, name_resolver: NameResolver, store: ConfigurationStore) -> None:
        self._name_resolver = name_resolver
        self._store = store

    def try_create(self, attribute: ChangeFeedTriggerAttribute, parameter_type: Any) -> ChangeFeedTriggerBinding:
        context = ResolutionContext(attribute=attribute, name_resolver=self._name_resolver, store=self._store)
        descriptor = resolve_binding(context, parameter_type)
        logger.info(
            "Created change feed binding monitored=%s lease=%s value_type=%s",
            descriptor.monitored_location.describe(),
            descriptor.lease_location.describe(),
            descriptor.trigger_value_type.value,
        )
        return ChangeFeedTriggerBinding(descriptor=descriptor)

    def try_create_for(self, func: Callable[..., Any]) -> ChangeFeedTriggerBinding | None:
        """Bind the first parameter of a function decorated with change_feed_trigger."""
        registration = registration_for(func)
        if registration is None:
            return None
        parameters = list(inspect.signature(func).parameters.values())
        if not parameters:
            raise InvalidOperationError(f"{func.__qualname__} has no parameter to bind the change feed to.")
        annotation = _bound_annotation(func, parameters[0])
        return self.try_create(registration.attribute, annotation)


def _bound_annotation(func: Callable[..., Any], parameter: inspect.Parameter) -> Any:
    """Evaluate the annotation of the bound parameter only.

    ``get_type_hints`` evaluates every annotation of ``func``; names imported
    under ``TYPE_CHECKING`` for other parameters make it fail, in which case
    only the bound parameter's annotation is evaluated.
    """
    try:
        return typing.get_type_hints(func).get(parameter.name, parameter.annotation)
    except (NameError, TypeError) as exc:
        logger.debug("Type hints of %s not fully resolvable: %s", func.__qualname__, exc)

    annotation = parameter.annotation
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, getattr(func, "__globals__", {}))  # noqa: S307
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        raise InvalidOperationError(
            f"Can't resolve the type of {func.__qualname__}'s first parameter: {annotation!r}"
        ) from exc
