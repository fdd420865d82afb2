"""Connection string lookup and parsing for change feed bindings."""

from __future__ import annotations

import logging

from pydantic import AnyUrl, BaseModel, ConfigDict, SecretStr, TypeAdapter, ValidationError

from feedbind.config.names import (
    DEFAULT_CONNECTION_SETTING,
    ConfigurationStore,
    NameResolver,
    strip_placeholder,
)
from feedbind.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ACCOUNT_ENDPOINT_KEY = "accountendpoint"
ACCOUNT_KEY_KEY = "accountkey"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class ConnectionDescriptor(BaseModel):
    """Parsed account endpoint and key of one database account."""

    model_config = ConfigDict(frozen=True)

    service_endpoint: AnyUrl
    account_key: SecretStr


def parse_endpoint(value: str) -> AnyUrl:
    """Parse an absolute URI with a host; raise ValueError otherwise."""
    try:
        url = _URL_ADAPTER.validate_python(value.strip())
    except ValidationError as exc:
        raise ValueError("AccountEndpoint is not an absolute URI") from exc
    if not url.host:
        raise ValueError("AccountEndpoint has no host")
    return url


def parse_connection_string(text: str) -> ConnectionDescriptor:
    """Parse ``AccountEndpoint=<uri>;AccountKey=<key>;`` into a descriptor.

    Keys are case-insensitive and unknown keys are ignored. Values keep every
    character after the first ``=`` so padded base64 keys survive.
    """
    pairs: dict[str, str] = {}
    for segment in text.split(";"):
        if not segment.strip():
            continue
        if "=" not in segment:
            raise ValueError("connection string segment is not a Key=Value pair")
        key, value = segment.split("=", 1)
        pairs[key.strip().lower()] = value.strip()

    endpoint = pairs.get(ACCOUNT_ENDPOINT_KEY)
    account_key = pairs.get(ACCOUNT_KEY_KEY)
    if not endpoint:
        raise ValueError("AccountEndpoint is required")
    if not account_key:
        raise ValueError("AccountKey is required")
    return ConnectionDescriptor(
        service_endpoint=parse_endpoint(endpoint),
        account_key=SecretStr(account_key),
    )


def resolve_connection(
    setting: str | None,
    resolver: NameResolver,
    store: ConfigurationStore,
) -> ConnectionDescriptor:
    """Find and parse the connection string stored under ``setting``."""
    setting_name = setting.strip() if setting else ""
    if not setting_name:
        setting_name = DEFAULT_CONNECTION_SETTING
    lookup_name, _ = strip_placeholder(setting_name)

    raw = resolver.resolve(lookup_name)
    source = "name resolver"
    if not raw:
        raw = store.get(lookup_name)
        source = "configuration store"
    if not raw:
        logger.debug("No value for connection setting %s", lookup_name)
        raise ConfigurationError(lookup_name)

    try:
        descriptor = parse_connection_string(raw)
    except ValueError as exc:
        logger.debug("Connection setting %s from %s failed to parse: %s", lookup_name, source, exc)
        raise ConfigurationError(lookup_name) from exc
    logger.debug("Connection setting %s resolved from %s", lookup_name, source)
    return descriptor
