"""SalesRecord: a recorded sale, classified as primary mint or secondary market."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from solana_sales_tracker.models.sale_event import SaleEvent

SaleType = Literal["mint", "secondary"]


@dataclass(frozen=True, slots=True)
class SalesRecord:
    """Identity is data.tx_signature."""

    type: SaleType
    data: SaleEvent

    @property
    def tx_signature(self) -> str:
        return self.data.tx_signature

    @classmethod
    def classify(cls, sale: SaleEvent, update_authority: str) -> SalesRecord:
        """Mint sale when the seller is the collection's update authority, else secondary."""
        sale_type: SaleType = "mint" if sale.seller == update_authority else "secondary"
        return cls(type=sale_type, data=sale)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "data": self.data.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SalesRecord:
        sale_type: SaleType = "mint" if data.get("type") == "mint" else "secondary"
        return cls(type=sale_type, data=SaleEvent.from_dict(data.get("data") or {}))
