"""SaleEvent: normalized record of one detected NFT sale.

Created once per qualifying signature by SaleInfoBuilder and handed to the
output sinks. Never mutated. to_dict() is the camelCase wire form stored in
sales records and printed by the console sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN_MARKETPLACE = "Unknown"


@dataclass(frozen=True, slots=True)
class NftInfo:
    """NFT identity and display data."""

    mint: str
    id: str
    name: str
    image: str | None = None


@dataclass(frozen=True, slots=True)
class SaleEvent:
    """One NFT sale, ready for output."""

    time: int | None
    """Block time (unix seconds) of the transaction."""
    tx_signature: str
    market_place: str
    buyer: str
    seller: str
    sale_amount: str
    """Sale price in SOL with two decimals (e.g. "2.50")."""
    nft_info: NftInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": self.time,
            "txSignature": self.tx_signature,
            "marketPlace": self.market_place,
            "buyer": self.buyer,
            "seller": self.seller,
            "saleAmount": self.sale_amount,
            "nftInfo": {
                "mint": self.nft_info.mint,
                "id": self.nft_info.id,
                "name": self.nft_info.name,
                "image": self.nft_info.image,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SaleEvent:
        """Build from the camelCase wire form."""
        nft = data.get("nftInfo") or {}
        return cls(
            time=data.get("time"),
            tx_signature=str(data.get("txSignature") or ""),
            market_place=str(data.get("marketPlace") or UNKNOWN_MARKETPLACE),
            buyer=str(data.get("buyer") or ""),
            seller=str(data.get("seller") or ""),
            sale_amount=str(data.get("saleAmount") or "0.00"),
            nft_info=NftInfo(
                mint=str(nft.get("mint") or ""),
                id=str(nft.get("id") or ""),
                name=str(nft.get("name") or ""),
                image=nft.get("image"),
            ),
        )
