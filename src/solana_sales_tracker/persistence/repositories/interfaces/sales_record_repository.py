"""Abstract interface for the recorded-sales list."""

from __future__ import annotations

from abc import ABC, abstractmethod

from solana_sales_tracker.models.sales_record import SalesRecord


class ISalesRecordRepository(ABC):
    """Recorded sales per tracked account, keyed by transaction signature."""

    @abstractmethod
    async def list(self, account: str) -> list[SalesRecord]:
        """Return recorded sales in insertion order."""
        ...

    @abstractmethod
    async def add(self, account: str, record: SalesRecord) -> bool:
        """Record a sale. Returns False (no-op) if its signature is already recorded."""
        ...

    async def count(self, account: str) -> int:
        """Number of recorded sales. Default impl loads the list."""
        return len(await self.list(account))
