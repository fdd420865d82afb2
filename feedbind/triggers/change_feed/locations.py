"""Resolve monitored and lease collection locations for a trigger binding."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from feedbind.config.names import ConfigurationStore, NameResolver, resolve_placeholder
from feedbind.triggers.change_feed.config import ChangeFeedTriggerAttribute
from feedbind.triggers.change_feed.connection import ConnectionDescriptor, resolve_connection

logger = logging.getLogger(__name__)

DEFAULT_LEASE_COLLECTION_NAME = "leases"


class CollectionLocation(BaseModel):
    """One addressable collection: account connection plus database and collection names."""

    model_config = ConfigDict(frozen=True)

    connection: ConnectionDescriptor
    database_name: str
    collection_name: str

    def key(self) -> tuple[str, str, str]:
        """Identity of the physical collection, independent of credentials."""
        return (str(self.connection.service_endpoint), self.database_name, self.collection_name)

    def describe(self) -> str:
        return f"{self.connection.service_endpoint} {self.database_name}/{self.collection_name}"


def resolve_locations(
    attribute: ChangeFeedTriggerAttribute,
    resolver: NameResolver,
    store: ConfigurationStore,
) -> tuple[CollectionLocation, CollectionLocation]:
    """Return the (monitored, lease) locations described by ``attribute``."""
    monitored_connection = resolve_connection(attribute.connection_string_setting, resolver, store)
    database_name = resolve_placeholder(attribute.database_name, resolver)
    collection_name = resolve_placeholder(attribute.collection_name, resolver)
    monitored = CollectionLocation(
        connection=monitored_connection,
        database_name=database_name,
        collection_name=collection_name,
    )

    # Lease storage lives next to the monitored collection unless overridden.
    lease_setting = attribute.lease_connection_string_setting or attribute.connection_string_setting
    lease_connection = resolve_connection(lease_setting, resolver, store)
    if attribute.lease_database_name:
        lease_database = resolve_placeholder(attribute.lease_database_name, resolver)
    else:
        lease_database = database_name
    if attribute.lease_collection_name:
        lease_collection = resolve_placeholder(attribute.lease_collection_name, resolver)
    else:
        lease_collection = DEFAULT_LEASE_COLLECTION_NAME
    lease = CollectionLocation(
        connection=lease_connection,
        database_name=lease_database,
        collection_name=lease_collection,
    )
    logger.debug("Resolved monitored=%s lease=%s", monitored.describe(), lease.describe())
    return monitored, lease
