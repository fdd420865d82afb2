"""Checks that reject bindings which would corrupt their own checkpoint state."""

from __future__ import annotations

from feedbind.exceptions import InvalidOperationError
from feedbind.triggers.change_feed.locations import CollectionLocation


def validate_locations(monitored: CollectionLocation, lease: CollectionLocation) -> None:
    """Raise InvalidOperationError when the lease collection is the monitored collection.

    Locations are compared by endpoint, database and collection name, never by
    identity, so defaults that silently collide are caught too.
    """
    if monitored.key() == lease.key():
        raise InvalidOperationError(
            f"The monitored collection cannot be the same as the collection storing the leases "
            f"({monitored.database_name}/{monitored.collection_name})."
        )
