"""Key/value storage backends."""

from solana_sales_tracker.persistence.storage.base import IKeyValueStore
from solana_sales_tracker.persistence.storage.cos_store import CosKeyValueStore
from solana_sales_tracker.persistence.storage.file_store import FileKeyValueStore
from solana_sales_tracker.persistence.storage.in_memory import InMemoryKeyValueStore

__all__ = [
    "CosKeyValueStore",
    "FileKeyValueStore",
    "IKeyValueStore",
    "InMemoryKeyValueStore",
]
