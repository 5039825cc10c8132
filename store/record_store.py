"""Whole-collection persistence over a string-keyed blob backend.

Each collection lives under one key as a JSON document. Writes replace the
entire collection; callers read-modify-write. An absent key reads as an empty
collection, never as an error.
"""

import logging
from enum import Enum
from typing import Any, Protocol

from store.config import StoreConfig
from store.exceptions import CorruptRecordError

logger = logging.getLogger(__name__)


class CollectionKey(str, Enum):
    """Logical collection names."""

    USERS = "users"
    PETS = "pets"
    AUTH_SESSION = "auth-session"


class BlobBackend(Protocol):
    """What the record store needs from a backend (ValkeyClient, MemoryClient)."""

    def get_json(self, key: str) -> dict | list | None: ...

    def set_json(self, key: str, value: dict | list) -> None: ...

    def delete(self, key: str) -> bool: ...

    def close(self) -> None: ...


class RecordStore:
    """Generic get/put of whole collections.

    Holds no cached state: every call goes to the backend.
    """

    def __init__(self, backend: BlobBackend, config: StoreConfig):
        self._backend = backend
        self._config = config

    def _key(self, collection: CollectionKey) -> str:
        """Physical backend key for a logical collection."""
        if collection is CollectionKey.USERS:
            return self._config.users_key
        if collection is CollectionKey.PETS:
            return self._config.pets_key
        return self._config.auth_key

    def _load(self, collection: CollectionKey) -> Any:
        key = self._key(collection)
        try:
            return self._backend.get_json(key)
        except ValueError as e:
            raise CorruptRecordError(str(e)) from e

    def read(self, collection: CollectionKey) -> list[dict[str, Any]]:
        """
        Read a whole collection.

        Returns:
            List of raw records, empty if the key is absent.

        Raises:
            CorruptRecordError: If the stored value is not a JSON array.
        """
        data = self._load(collection)
        if data is None:
            return []
        if not isinstance(data, list):
            raise CorruptRecordError(
                f"Collection '{collection.value}' is not a list: {type(data).__name__}"
            )
        return data

    def write(self, collection: CollectionKey, records: list[dict[str, Any]]) -> None:
        """Replace a whole collection."""
        self._backend.set_json(self._key(collection), list(records))
        logger.debug("Wrote %d records to %s", len(records), collection.value)

    def read_object(self, collection: CollectionKey) -> dict[str, Any] | None:
        """
        Read a single-object entry (the auth session).

        Returns None if the key is absent.
        """
        data = self._load(collection)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise CorruptRecordError(
                f"Entry '{collection.value}' is not an object: {type(data).__name__}"
            )
        return data

    def write_object(self, collection: CollectionKey, value: dict[str, Any]) -> None:
        """Replace a single-object entry."""
        self._backend.set_json(self._key(collection), value)
        logger.debug("Wrote object to %s", collection.value)

    def clear(self) -> None:
        """Drop every collection. Used on teardown."""
        for collection in CollectionKey:
            self._backend.delete(self._key(collection))
        logger.info("Record store cleared")

    def close(self) -> None:
        """Close the underlying backend."""
        self._backend.close()
