"""Record identifiers."""

import secrets

from utils.timezone import now_utc

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_id() -> str:
    """
    Millisecond timestamp followed by 9 random base-36 characters.

    Ids sort roughly by creation time, but created_at is the sort key;
    never order records by id.
    """
    millis = int(now_utc().timestamp() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{millis}{suffix}"
