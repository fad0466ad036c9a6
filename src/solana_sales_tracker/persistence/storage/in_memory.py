# -*- coding: utf-8 -*-
"""In-memory key/value store."""

from __future__ import annotations

from solana_sales_tracker.persistence.storage.base import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """In-memory implementation of IKeyValueStore."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize the store, optionally pre-seeded."""
        self._store: dict[str, str] = dict(initial or {})

    async def read(self, key: str) -> str | None:
        return self._store.get(key)

    async def write(self, key: str, contents: str) -> None:
        self._store[key] = contents
