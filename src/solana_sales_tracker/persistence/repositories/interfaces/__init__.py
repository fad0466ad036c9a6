# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in key_value/."""

from solana_sales_tracker.persistence.repositories.interfaces.processed_signature_repository import (
    IProcessedSignatureRepository,
)
from solana_sales_tracker.persistence.repositories.interfaces.sales_record_repository import (
    ISalesRecordRepository,
)

__all__ = [
    "IProcessedSignatureRepository",
    "ISalesRecordRepository",
]
