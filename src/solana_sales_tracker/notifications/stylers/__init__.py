"""Sale renderers."""

from solana_sales_tracker.notifications.stylers.sale_styler import MINT_MARKETPLACE, SaleStyler

__all__ = ["MINT_MARKETPLACE", "SaleStyler"]
