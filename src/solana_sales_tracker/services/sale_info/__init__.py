"""Sale event assembly."""

from solana_sales_tracker.services.sale_info.sale_info_builder import SaleInfoBuilder

__all__ = ["SaleInfoBuilder"]
