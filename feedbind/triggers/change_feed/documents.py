"""Normalization of delivered change feed payloads into document lists."""

from __future__ import annotations

import collections.abc
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any, get_args, get_origin

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from feedbind.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)

JsonArray = list[dict[str, Any]]


class Document(BaseModel):
    """A structured document; ``id`` is its identity, other keys are opaque."""

    model_config = ConfigDict(extra="allow")

    id: str


class TriggerValueType(str, Enum):
    """Shape of the value handed to the bound function."""

    DOCUMENT_LIST = "document_list"
    GENERIC_ARRAY = "generic_array"


_DOCUMENT_LIST_ADAPTER: TypeAdapter[list[Document]] = TypeAdapter(list[Document])
_SEQUENCE_ORIGINS = (list, tuple, collections.abc.Sequence)


def _is_document_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, Document)


def trigger_value_type_for(annotation: Any) -> TriggerValueType:
    """Pick the trigger value type for a bound parameter annotation."""
    if isinstance(annotation, TriggerValueType):
        return annotation
    if annotation in (list, tuple):
        return TriggerValueType.GENERIC_ARRAY
    origin = get_origin(annotation)
    if origin in _SEQUENCE_ORIGINS:
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        if not args:
            return TriggerValueType.GENERIC_ARRAY
        item = args[0]
        if _is_document_type(item):
            return TriggerValueType.DOCUMENT_LIST
        item_origin = get_origin(item) or item
        if item is Any or item_origin in (dict, collections.abc.Mapping):
            return TriggerValueType.GENERIC_ARRAY
    raise InvalidOperationError(f"Can't bind a change feed trigger to type '{annotation!r}'.")


def try_convert_to_document_list(payload: Any) -> tuple[Sequence[Document] | None, bool]:
    """Coerce ``payload`` into a document list; never raises.

    Returns ``(documents, True)`` on success and ``(None, False)`` otherwise.
    An existing document sequence is returned as the same object.
    """
    if payload is None:
        return None, False
    if isinstance(payload, (list, tuple)):
        if all(isinstance(item, Document) for item in payload):
            return payload, True
        return None, False
    if isinstance(payload, str):
        try:
            return _DOCUMENT_LIST_ADAPTER.validate_json(payload), True
        except ValidationError as exc:
            logger.debug("Payload is not a JSON array of documents: %d error(s)", exc.error_count())
            return None, False
    return None, False


def to_trigger_value(documents: Sequence[Document], value_type: TriggerValueType) -> Any:
    """Shape a document list for a function declared with ``value_type``."""
    if value_type is TriggerValueType.GENERIC_ARRAY:
        return [document.model_dump(mode="json") for document in documents]
    return documents
