"""Persistence: record store, configuration and storage errors.

The domain repository lives in store.repository.
"""

from store.exceptions import StorageError, StorageQuotaExceededError, CorruptRecordError
from store.config import StoreConfig
from store.record_store import RecordStore, CollectionKey
