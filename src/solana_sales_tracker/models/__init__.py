# -*- coding: utf-8 -*-
"""Domain models."""

from solana_sales_tracker.models.balance_diff import BalanceDiffResult
from solana_sales_tracker.models.mint_metadata import Creator, MintMetadata
from solana_sales_tracker.models.processed_ledger import ProcessedSignatureLedger
from solana_sales_tracker.models.results import (
    CheckSalesResult,
    FetchResult,
    SaleDetection,
    SignatureBatch,
    ValidationOutcome,
)
from solana_sales_tracker.models.sale_event import UNKNOWN_MARKETPLACE, NftInfo, SaleEvent
from solana_sales_tracker.models.sales_record import SalesRecord, SaleType
from solana_sales_tracker.models.transaction_record import TokenBalance, TransactionRecord

__all__ = [
    "BalanceDiffResult",
    "CheckSalesResult",
    "Creator",
    "FetchResult",
    "MintMetadata",
    "NftInfo",
    "ProcessedSignatureLedger",
    "SaleDetection",
    "SaleEvent",
    "SaleType",
    "SalesRecord",
    "SignatureBatch",
    "TokenBalance",
    "TransactionRecord",
    "UNKNOWN_MARKETPLACE",
    "ValidationOutcome",
]
