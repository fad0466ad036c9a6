"""Marketplace resolution."""

from solana_sales_tracker.services.marketplace.marketplace_resolver import MarketplaceResolver

__all__ = ["MarketplaceResolver"]
