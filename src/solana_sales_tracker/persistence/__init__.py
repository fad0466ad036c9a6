"""Persistence layer (storage backends and repositories)."""

from solana_sales_tracker.persistence.repositories import (
    IProcessedSignatureRepository,
    ISalesRecordRepository,
    KeyValueProcessedSignatureRepository,
    KeyValueSalesRecordRepository,
)
from solana_sales_tracker.persistence.storage import (
    FileKeyValueStore,
    IKeyValueStore,
    InMemoryKeyValueStore,
)

__all__ = [
    "FileKeyValueStore",
    "IKeyValueStore",
    "IProcessedSignatureRepository",
    "ISalesRecordRepository",
    "InMemoryKeyValueStore",
    "KeyValueProcessedSignatureRepository",
    "KeyValueSalesRecordRepository",
]
