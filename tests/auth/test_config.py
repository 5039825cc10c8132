"""Tests for auth/config.py - Auth configuration with validation."""

import pytest
from pydantic import ValidationError

from auth.config import AuthConfig


class TestAuthConfigDefaults:
    """Tests that AuthConfig has sensible defaults."""

    def test_event_buffer_default(self):
        assert AuthConfig().security_event_buffer_size == 100


class TestAuthConfigValidation:
    """Tests that AuthConfig enforces validation bounds."""

    def test_event_buffer_min_bound(self):
        with pytest.raises(ValidationError):
            AuthConfig(security_event_buffer_size=0)  # < 1

    def test_event_buffer_max_bound(self):
        with pytest.raises(ValidationError):
            AuthConfig(security_event_buffer_size=10001)  # > 10000
