"""TransactionRecord: canonical, explorer-independent view of one transaction.

Account balances are parallel sequences indexed like account_keys. Token
balances are keyed by mint. Built by TransactionFetcher; transient per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenBalance:
    """Token balance entry of a transaction (pre or post)."""

    mint: str
    amount: Any = None
    """Amount as reported by the explorer; not interpreted."""


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """Normalized transaction: participants, lamport balances, token balances, block time."""

    signature: str
    account_keys: tuple[str, ...] = ()
    pre_balances: tuple[int, ...] = ()
    post_balances: tuple[int, ...] = ()
    pre_token_balances: tuple[TokenBalance, ...] = ()
    post_token_balances: tuple[TokenBalance, ...] = ()
    block_time: int | None = None

    def __post_init__(self) -> None:
        n = len(self.account_keys)
        if len(self.pre_balances) != n or len(self.post_balances) != n:
            raise ValueError(
                "account_keys, pre_balances and post_balances must have the same length "
                f"({n}, {len(self.pre_balances)}, {len(self.post_balances)})"
            )

    @property
    def is_empty(self) -> bool:
        """True for the zero record (no accounts)."""
        return not self.account_keys

    @classmethod
    def empty(cls, signature: str) -> TransactionRecord:
        """Zero record used when the transaction could not be fetched."""
        return cls(signature=signature)
