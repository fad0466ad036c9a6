"""Abstract key/value storage backing the ledger and sales records (file, memory, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """String documents addressed by key. One instance is shared by all repositories."""

    @abstractmethod
    async def read(self, key: str) -> str | None:
        """Return the stored contents for key, or None if absent."""
        ...

    @abstractmethod
    async def write(self, key: str, contents: str) -> None:
        """Store contents under key, replacing any previous value."""
        ...

    async def prepare(self) -> None:
        """Make the backing storage ready for use (no-op unless the backend needs it)."""
        return None
