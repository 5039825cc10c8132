"""Utility modules for cross-cutting concerns."""

from utils.timezone import now_utc, to_utc, to_local, format_date
from utils.ids import generate_id
