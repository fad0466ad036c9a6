"""Transaction retrieval and normalization."""

from solana_sales_tracker.services.transactions.transaction_fetcher import (
    TransactionFetcher,
    record_from_detail,
)

__all__ = ["TransactionFetcher", "record_from_detail"]
