"""Sale detection orchestration."""

from solana_sales_tracker.services.sales_checker.sales_checker import SalesChecker

__all__ = ["SalesChecker"]
