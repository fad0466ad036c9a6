"""BalanceDiffResult: facts inferred from a transaction's lamport balance changes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class BalanceDiffResult:
    """Per-account deltas plus inferred buyer, seller, mint and sale amount.

    - buyer: first account of the transaction (fee payer / initiator).
    - seller: account with the strictly largest positive delta; "" if none.
    - mint_info: mint of the first post-token-balance entry; "" if none.
    - sale_amount: abs(buyer delta) in SOL, two decimals (e.g. "2.50").
    """

    balance_differences: dict[str, int] = field(default_factory=dict)
    pre_balances: dict[str, int] = field(default_factory=dict)
    post_balances: dict[str, int] = field(default_factory=dict)
    buyer: str = ""
    seller: str = ""
    mint_info: str = ""
    sale_amount: str = "0.00"
    all_addresses: tuple[str, ...] = ()

    def delta(self, address: str) -> int:
        """Signed lamport delta of address; 0 when the address did not take part."""
        return self.balance_differences.get(address, 0)
