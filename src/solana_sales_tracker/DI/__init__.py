"""Dependency injection."""

from solana_sales_tracker.DI.container import Container

__all__ = ["Container"]
