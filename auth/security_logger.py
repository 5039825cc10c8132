"""Security event logging for the auth audit trail.

Events go to the standard logging system and into a bounded in-memory buffer
that keeps the most recent ones for inspection. Failure reasons are recorded
here only; the auth API never exposes them to callers.
"""

import logging
from collections import deque
from enum import Enum
from typing import Any

from utils.timezone import now_utc

logger = logging.getLogger(__name__)


class SecurityEvent(Enum):
    """Auth security event types."""

    USER_REGISTERED = "user_registered"
    REGISTRATION_REJECTED = "registration_rejected"
    LOGIN_SUCCEEDED = "login_succeeded"
    LOGIN_FAILED = "login_failed"
    LOGGED_OUT = "logged_out"


_WARNING_EVENTS = {SecurityEvent.LOGIN_FAILED, SecurityEvent.REGISTRATION_REJECTED}


class SecurityLogger:
    """Append-only security event logger with a bounded recent-events buffer."""

    def __init__(self, buffer_size: int = 100):
        self._events: deque[dict[str, Any]] = deque(maxlen=buffer_size)

    def log(
        self,
        event: SecurityEvent,
        email: str | None = None,
        user_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Record a security event."""
        record = {
            "event_type": event.value,
            "email": email,
            "user_id": user_id,
            "details": details,
            "created_at": now_utc(),
        }
        self._events.append(record)

        level = logging.WARNING if event in _WARNING_EVENTS else logging.INFO
        logger.log(
            level,
            "security event %s email=%s user_id=%s details=%s",
            event.value,
            email,
            user_id,
            details,
        )

    def get_recent_events(
        self,
        email: str | None = None,
        event_type: SecurityEvent | None = None,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        """Recent events, newest first, with optional filters."""
        events = []
        for record in reversed(self._events):
            if email is not None and record["email"] != email:
                continue
            if event_type is not None and record["event_type"] != event_type.value:
                continue
            events.append(dict(record))
            if len(events) >= limit:
                break
        return events
