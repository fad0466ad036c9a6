"""Marketplace resolution from the program/escrow addresses a transaction touches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from solana_sales_tracker.config import MarketplaceInfo


class MarketplaceResolver:
    """Maps a transaction's participant addresses to a marketplace name.

    Marketplaces are checked in configured order; the first one sharing an
    address with the transaction wins.
    """

    def __init__(self, marketplaces: Sequence[MarketplaceInfo]) -> None:
        self._marketplaces = tuple(marketplaces)

    @property
    def marketplaces(self) -> tuple[MarketplaceInfo, ...]:
        return self._marketplaces

    def resolve(self, addresses: Iterable[str]) -> str:
        """Return the first matching marketplace name, or "" if none match."""
        participants = set(addresses)
        for marketplace in self._marketplaces:
            if participants.intersection(marketplace.addresses):
                return marketplace.name
        return ""
