"""Repository implementations over an IKeyValueStore."""

from solana_sales_tracker.persistence.repositories.key_value.processed_signature_repository import (
    KeyValueProcessedSignatureRepository,
    audit_file_key,
)
from solana_sales_tracker.persistence.repositories.key_value.sales_record_repository import (
    KeyValueSalesRecordRepository,
    sales_file_key,
)

__all__ = [
    "KeyValueProcessedSignatureRepository",
    "KeyValueSalesRecordRepository",
    "audit_file_key",
    "sales_file_key",
]
