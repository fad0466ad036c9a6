"""Solana NFT sales tracker: idempotent sale detection for one collection's royalties account."""

from solana_sales_tracker.config import get_settings
from solana_sales_tracker.DI import Container
from solana_sales_tracker.services.sales_checker import SalesChecker

__version__ = "0.1.0"
__all__ = [
    "Container",
    "SalesChecker",
    "get_settings",
]
