"""Explorer API client and response schema."""

from solana_sales_tracker.clients.explorer_api.explorer_api import ExplorerApiClient
from solana_sales_tracker.clients.explorer_api.schema import (
    AccountTransactionSchema,
    InputAccountSchema,
    TokenBalanceSchema,
    TransactionDetailSchema,
)

__all__ = [
    "AccountTransactionSchema",
    "ExplorerApiClient",
    "InputAccountSchema",
    "TokenBalanceSchema",
    "TransactionDetailSchema",
]
