"""Balance-diff analysis: infer buyer, seller, mint and price from lamport balance changes."""

from __future__ import annotations

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import structlog

from solana_sales_tracker.models.balance_diff import BalanceDiffResult
from solana_sales_tracker.models.transaction_record import TransactionRecord

LAMPORTS_PER_SOL = 10**9
_CENTS = Decimal("0.01")


def lamports_to_sol(lamports: int) -> str:
    """Absolute lamport amount in SOL, rounded half-up to two decimals ("2.50")."""
    sol = Decimal(abs(lamports)) / Decimal(LAMPORTS_PER_SOL)
    return str(sol.quantize(_CENTS, rounding=ROUND_HALF_UP))


class BalanceDiffAnalyzer:
    """Derives a BalanceDiffResult from a TransactionRecord.

    The heuristic assumes the account credited the most lamports is the
    seller and the first account (fee payer) is the buyer.
    """

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def analyze(self, record: TransactionRecord) -> BalanceDiffResult:
        """Compute per-account deltas and the inferred sale facts.

        Addresses without a pre balance get no delta. Ties for the largest
        positive delta go to the address that appears first.
        """
        pre = dict(zip(record.account_keys, record.pre_balances))
        post = dict(zip(record.account_keys, record.post_balances))

        differences: dict[str, int] = {}
        seller = ""
        largest = 0
        for address, balance in post.items():
            if address not in pre:
                continue
            delta = balance - pre[address]
            differences[address] = delta
            if delta > largest:
                seller = address
                largest = delta

        buyer = record.account_keys[0] if record.account_keys else ""
        mint = record.post_token_balances[0].mint if record.post_token_balances else ""
        sale_amount = lamports_to_sol(differences.get(buyer, 0))

        result = BalanceDiffResult(
            balance_differences=differences,
            pre_balances=pre,
            post_balances=post,
            buyer=buyer,
            seller=seller,
            mint_info=mint,
            sale_amount=sale_amount,
            all_addresses=tuple(record.account_keys),
        )
        self._logger.debug(
            "balance_diff_analyzed",
            tx_signature=record.signature,
            balance_accounts=len(differences),
            balance_seller=seller,
            balance_mint=mint,
            balance_sale_amount=sale_amount,
        )
        return result

    @staticmethod
    def qualifies(result: BalanceDiffResult, royalty_account: str) -> bool:
        """True when the royalty account was credited (a sale of the tracked collection)."""
        return bool(royalty_account) and result.delta(royalty_account) > 0
