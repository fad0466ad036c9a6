"""Account history pagination."""

from solana_sales_tracker.services.history.history_cursor import HistoryCursor

__all__ = ["HistoryCursor"]
