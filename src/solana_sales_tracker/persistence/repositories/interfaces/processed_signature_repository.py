"""Abstract interface for processed-signature ledger storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from solana_sales_tracker.models.processed_ledger import ProcessedSignatureLedger


class IProcessedSignatureRepository(ABC):
    """Persists one ProcessedSignatureLedger per tracked account (single writer per account)."""

    @abstractmethod
    async def load(self, account: str) -> ProcessedSignatureLedger:
        """Return the ledger for account. Creates and persists an empty one if none exists."""
        ...

    @abstractmethod
    async def save(self, account: str, ledger: ProcessedSignatureLedger) -> None:
        """Persist the ledger for account, replacing the previous state."""
        ...
