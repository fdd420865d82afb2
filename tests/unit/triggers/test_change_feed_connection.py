from __future__ import annotations

import pytest

from feedbind.config import DEFAULT_CONNECTION_SETTING, FeedBindConfig, SettingsStore, StaticNameResolver
from feedbind.exceptions import BindingError, ConfigurationError
from feedbind.triggers.change_feed import parse_connection_string, resolve_connection


def test_parse_connection_string_reads_endpoint_and_key() -> None:
    descriptor = parse_connection_string("AccountEndpoint=https://myaccount.documents.azure.com:443/;AccountKey=c29tZV9rZXk=;")

    assert descriptor.service_endpoint.host == "myaccount.documents.azure.com"
    assert descriptor.account_key.get_secret_value() == "c29tZV9rZXk="


def test_parse_connection_string_accepts_missing_trailing_semicolon_and_unknown_keys() -> None:
    descriptor = parse_connection_string("accountendpoint=https://someuri;Database=ignored;ACCOUNTKEY=key==")

    assert descriptor.service_endpoint.host == "someuri"
    assert descriptor.account_key.get_secret_value() == "key=="


def test_parse_connection_string_keeps_key_secret_in_repr() -> None:
    descriptor = parse_connection_string("AccountEndpoint=https://someuri;AccountKey=topsecret;")

    assert "topsecret" not in repr(descriptor)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "AccountKey=someKey;",
        "AccountEndpoint=https://someuri;",
        "AccountEndpoint=;AccountKey=someKey;",
        "AccountEndpoint=not a uri;AccountKey=someKey;",
        "AccountEndpoint=/relative/path;AccountKey=someKey;",
        "AccountEndpoint=https://someuri;AccountKey=someKey;garbage",
        "some weird string",
    ],
)
def test_parse_connection_string_rejects_malformed_values(text: str) -> None:
    with pytest.raises(ValueError):
        parse_connection_string(text)


def test_resolve_connection_defaults_setting_name() -> None:
    resolver = StaticNameResolver({DEFAULT_CONNECTION_SETTING: "AccountEndpoint=https://fromEnvironment;AccountKey=k;"})
    store = SettingsStore(FeedBindConfig())

    descriptor = resolve_connection(None, resolver, store)

    assert descriptor.service_endpoint.host == "fromenvironment"


def test_resolve_connection_prefers_name_resolver_over_store() -> None:
    resolver = StaticNameResolver({"Cosmos": "AccountEndpoint=https://fromResolver;AccountKey=k;"})
    store = SettingsStore(
        FeedBindConfig(connection_strings={"Cosmos": "AccountEndpoint=https://fromStore;AccountKey=k;"})
    )

    descriptor = resolve_connection("Cosmos", resolver, store)

    assert descriptor.service_endpoint.host == "fromresolver"


def test_resolve_connection_falls_back_to_store() -> None:
    store = SettingsStore(
        FeedBindConfig(connection_strings={"Cosmos": "AccountEndpoint=https://fromStore;AccountKey=k;"})
    )

    descriptor = resolve_connection("Cosmos", StaticNameResolver(), store)

    assert descriptor.service_endpoint.host == "fromstore"


def test_resolve_connection_strips_placeholder_wrapping() -> None:
    resolver = StaticNameResolver({"Cosmos": "AccountEndpoint=https://wrapped;AccountKey=k;"})

    descriptor = resolve_connection("%Cosmos%", resolver, SettingsStore(FeedBindConfig()))

    assert descriptor.service_endpoint.host == "wrapped"


def test_resolve_connection_missing_setting_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_connection("Missing", StaticNameResolver(), SettingsStore(FeedBindConfig()))

    assert isinstance(exc_info.value, BindingError)
    assert str(exc_info.value) == "Missing connection string is missing or invalid"


def test_resolve_connection_invalid_value_raises_without_leaking_secret() -> None:
    resolver = StaticNameResolver({"Cosmos": "AccountEndpoint=nope;AccountKey=topsecret;"})

    with pytest.raises(ConfigurationError) as exc_info:
        resolve_connection("Cosmos", resolver, SettingsStore(FeedBindConfig()))

    assert "topsecret" not in str(exc_info.value)
    assert exc_info.value.setting == "Cosmos"
