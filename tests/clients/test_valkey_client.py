"""Tests for ValkeyClient - Redis-compatible blob backend."""

from unittest.mock import MagicMock, patch

import pytest
import redis

from clients.valkey_client import ValkeyClient, get_valkey_url
from store.exceptions import StorageQuotaExceededError


@pytest.fixture
def mock_redis():
    """Patched redis connection - no server needed."""
    with patch("clients.valkey_client.redis.from_url") as from_url:
        conn = MagicMock()
        from_url.return_value = conn
        yield conn


@pytest.fixture
def client(mock_redis):
    return ValkeyClient("redis://localhost:6379/0")


class TestValkeyClientInit:
    """Connection initialization."""

    def test_pings_on_connect(self, mock_redis):
        """Constructor verifies connectivity immediately."""
        ValkeyClient("redis://localhost:6379/0")
        mock_redis.ping.assert_called_once()

    def test_connection_failure_propagates(self, mock_redis):
        """Unreachable server fails fast."""
        mock_redis.ping.side_effect = redis.ConnectionError("refused")
        with pytest.raises(redis.ConnectionError):
            ValkeyClient("redis://localhost:6379/0")


class TestGetValkeyUrl:
    """Connection URL from environment."""

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("VALKEY_URL", "redis://cache:6379/1")
        assert get_valkey_url() == "redis://cache:6379/1"

    def test_missing_raises(self, monkeypatch):
        monkeypatch.delenv("VALKEY_URL", raising=False)
        with pytest.raises(ValueError, match="VALKEY_URL"):
            get_valkey_url()


class TestWrites:
    """Set and delete."""

    def test_set_passes_through(self, client, mock_redis):
        client.set("k", "v")
        mock_redis.set.assert_called_once_with("k", "v")

    def test_oom_becomes_quota_error(self, client, mock_redis):
        """Server out-of-memory reply is reported as quota exhaustion."""
        mock_redis.set.side_effect = redis.ResponseError(
            "OOM command not allowed when used memory > 'maxmemory'."
        )
        with pytest.raises(StorageQuotaExceededError):
            client.set("k", "v")

    def test_other_response_errors_propagate(self, client, mock_redis):
        mock_redis.set.side_effect = redis.ResponseError("WRONGTYPE")
        with pytest.raises(redis.ResponseError):
            client.set("k", "v")

    def test_delete_reports_existence(self, client, mock_redis):
        mock_redis.delete.return_value = 1
        assert client.delete("k") is True
        mock_redis.delete.return_value = 0
        assert client.delete("k") is False


class TestJsonHelpers:
    """JSON serialization helpers."""

    def test_set_json_serializes(self, client, mock_redis):
        client.set_json("k", [{"id": "1"}])
        mock_redis.set.assert_called_once_with("k", '[{"id": "1"}]')

    def test_get_json_missing_returns_none(self, client, mock_redis):
        mock_redis.get.return_value = None
        assert client.get_json("k") is None

    def test_get_json_invalid_raises(self, client, mock_redis):
        mock_redis.get.return_value = "not valid json {"
        with pytest.raises(ValueError):
            client.get_json("k")


class TestAgainstServer:
    """Round trips against a live Valkey (skipped without VALKEY_URL)."""

    def test_json_roundtrip(self, valkey):
        data = [{"id": "1", "name": "Buddy"}]
        valkey.set_json("test:petconnect:json", data)
        assert valkey.get_json("test:petconnect:json") == data
        valkey.delete("test:petconnect:json")

    def test_get_missing_returns_none(self, valkey):
        assert valkey.get("test:petconnect:nonexistent") is None
