"""Typed exceptions for storage failures.

These are the only faults expected to cross the core boundary uncaught.
Lookups that miss return None; they never raise.
"""


class StorageError(Exception):
    """Base class for record store failures."""


class StorageQuotaExceededError(StorageError):
    """Backend refused a write because it ran out of space."""


class CorruptRecordError(StorageError):
    """
    Stored value could not be decoded.

    Raised for invalid JSON, a collection that is not a list, a session that
    is not an object, or records that fail model validation.
    """
