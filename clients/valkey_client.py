"""
Valkey (Redis-compatible) blob backend for the record store.

Simple wrapper around redis-py. Connection URL from the environment.
Fail-fast: raises on connection failure, never returns fallback values.
"""

import json
import logging
import os

import redis

from store.exceptions import StorageQuotaExceededError

logger = logging.getLogger(__name__)


def get_valkey_url() -> str:
    """
    Valkey connection URL from VALKEY_URL.

    Raises ValueError if the variable is missing.
    """
    url = os.getenv("VALKEY_URL")
    if not url:
        raise ValueError("VALKEY_URL environment variable is required")
    return url


class ValkeyClient:
    """
    Redis-compatible client for Valkey.

    Usage:
        client = ValkeyClient("redis://localhost:6379/0")
        client.set("key", "value")
        value = client.get("key")  # Returns None if missing
    """

    def __init__(self, url: str):
        """
        Initialize Valkey connection.

        Args:
            url: Redis-compatible connection URL (e.g., redis://localhost:6379/0)

        Raises:
            redis.ConnectionError: If connection fails
        """
        self._client = redis.from_url(url, decode_responses=True)
        # Verify connectivity immediately (fail-fast)
        self._client.ping()
        logger.info("ValkeyClient connected")

    def ping(self) -> bool:
        """
        Health check.

        Returns True if Valkey responds.
        Raises redis.ConnectionError if unreachable.
        """
        self._client.ping()
        return True

    def get(self, key: str) -> str | None:
        """
        Get value by key.

        Returns None if key doesn't exist (not an error).
        Raises on connection failure.
        """
        return self._client.get(key)

    def set(self, key: str, value: str) -> None:
        """
        Set key to value.

        Raises:
            StorageQuotaExceededError: If the server refuses the write for lack of memory
        """
        try:
            self._client.set(key, value)
        except redis.ResponseError as e:
            if str(e).startswith("OOM"):
                raise StorageQuotaExceededError(f"Valkey refused write to '{key}': {e}") from e
            raise

    def delete(self, key: str) -> bool:
        """
        Delete key.

        Returns True if key existed and was deleted, False if key didn't exist.
        """
        return self._client.delete(key) > 0

    def exists(self, key: str) -> bool:
        """Check if key exists."""
        return self._client.exists(key) > 0

    def set_json(self, key: str, value: dict | list) -> None:
        """
        Set key to JSON-serialized value.

        Args:
            key: Key to set
            value: Dict or list to serialize
        """
        json_str = json.dumps(value)
        self.set(key, json_str)

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
        """Close the connection."""
        self._client.close()
        logger.info("ValkeyClient closed")
