"""Logging setup."""

from solana_sales_tracker.logging.config import configure_logging

__all__ = ["configure_logging"]
