# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (key_value)."""

from solana_sales_tracker.persistence.repositories.interfaces import (
    IProcessedSignatureRepository,
    ISalesRecordRepository,
)
from solana_sales_tracker.persistence.repositories.key_value import (
    KeyValueProcessedSignatureRepository,
    KeyValueSalesRecordRepository,
)

__all__ = [
    "IProcessedSignatureRepository",
    "ISalesRecordRepository",
    "KeyValueProcessedSignatureRepository",
    "KeyValueSalesRecordRepository",
]
