"""
In-process blob backend with a byte quota.

Mirrors the ValkeyClient surface so the record store can run without a server:
one process, one store, values kept as JSON strings exactly as they would be
persisted. The quota models browser storage limits; a write that would push
the total size past it is refused and leaves the previous value in place.
"""

import json
import logging

from store.exceptions import StorageQuotaExceededError

logger = logging.getLogger(__name__)


class MemoryClient:
    """
    Dict-backed string store.

    Usage:
        client = MemoryClient(quota_bytes=5 * 1024 * 1024)
        client.set_json("petconnect_pets", [])
        pets = client.get_json("petconnect_pets")
    """

    def __init__(self, quota_bytes: int | None = None):
        self._data: dict[str, str] = {}
        self._quota_bytes = quota_bytes
        logger.info("MemoryClient created (quota_bytes=%s)", quota_bytes)

    def _size_with(self, key: str, value: str) -> int:
        """Total stored size in bytes if key were set to value."""
        total = 0
        for k, v in self._data.items():
            if k == key:
                continue
            total += len(k.encode()) + len(v.encode())
        return total + len(key.encode()) + len(value.encode())

    def ping(self) -> bool:
        return True

    def get(self, key: str) -> str | None:
        """Get value by key. Returns None if key doesn't exist."""
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """
        Set key to value.

        Raises:
            StorageQuotaExceededError: If the write would exceed the quota
        """
        if self._quota_bytes is not None:
            size = self._size_with(key, value)
            if size > self._quota_bytes:
                raise StorageQuotaExceededError(
                    f"Writing '{key}' needs {size} bytes, quota is {self._quota_bytes}"
                )
        self._data[key] = value

    def delete(self, key: str) -> bool:
        """Delete key. Returns True if key existed."""
        return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._data

    def set_json(self, key: str, value: dict | list) -> None:
        """Set key to JSON-serialized value."""
        self.set(key, json.dumps(value))

    def get_json(self, key: str) -> dict | list | None:
        """
        Get and deserialize JSON value.

        Returns None if key doesn't exist.
        Raises ValueError if value is not valid JSON.
        """
        value = self.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in key '{key}': {e}")

    def close(self) -> None:
        """Drop all stored values."""
        self._data.clear()
        logger.info("MemoryClient closed")
