"""MintMetadata: decoded Metaplex metadata of one mint."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Creator:
    """Creator entry of a metadata account."""

    address: str
    verified: bool = False
    share: int = 0


@dataclass(frozen=True, slots=True)
class MintMetadata:
    """On-chain metadata used for authenticity checks and to locate off-chain asset JSON."""

    update_authority: str
    mint: str
    name: str
    uri: str
    symbol: str = ""
    seller_fee_basis_points: int = 0
    creators: tuple[Creator, ...] = ()

    @property
    def creator_addresses(self) -> tuple[str, ...]:
        return tuple(c.address for c in self.creators)
