"""Transaction fetcher: explorer transaction detail normalized into a TransactionRecord."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog

from solana_sales_tracker.exceptions import TrackerAPIError
from solana_sales_tracker.models.results import FetchResult
from solana_sales_tracker.models.transaction_record import TokenBalance, TransactionRecord

if TYPE_CHECKING:
    from solana_sales_tracker.clients.explorer_api import ExplorerApiClient
    from solana_sales_tracker.clients.explorer_api.schema import TransactionDetailSchema


def record_from_detail(signature: str, detail: TransactionDetailSchema) -> TransactionRecord:
    """Build a TransactionRecord from GET /transaction/<signature>.

    inputAccount gives the ordered participants with their lamport balances;
    each tokenBalanes entry contributes one pre and one post token balance.

    Raises:
        ValueError: If the payload is malformed.
    """
    accounts = detail.get("inputAccount") or []
    token_balances = detail.get("tokenBalanes") or []
    if not isinstance(accounts, list) or not isinstance(token_balances, list):
        raise ValueError("inputAccount and tokenBalanes must be lists")

    keys: list[str] = []
    pre: list[int] = []
    post: list[int] = []
    for acct in cast(list[Any], accounts):
        if not isinstance(acct, dict):
            raise ValueError(f"Unexpected inputAccount entry: {type(acct).__name__}")
        a = cast(dict[str, Any], acct)
        keys.append(str(a.get("account") or ""))
        pre.append(int(a.get("preBalance") or 0))
        post.append(int(a.get("postBalance") or 0))

    pre_tokens: list[TokenBalance] = []
    post_tokens: list[TokenBalance] = []
    for bal in cast(list[Any], token_balances):
        if not isinstance(bal, dict):
            raise ValueError(f"Unexpected tokenBalanes entry: {type(bal).__name__}")
        b = cast(dict[str, Any], bal)
        mint = str((b.get("token") or {}).get("tokenAddress") or "")
        amount = b.get("amount") or {}
        pre_tokens.append(TokenBalance(mint=mint, amount=amount.get("preAmount")))
        post_tokens.append(TokenBalance(mint=mint, amount=amount.get("postAmount")))

    block_time = detail.get("blockTime")
    return TransactionRecord(
        signature=signature,
        account_keys=tuple(keys),
        pre_balances=tuple(pre),
        post_balances=tuple(post),
        pre_token_balances=tuple(pre_tokens),
        post_token_balances=tuple(post_tokens),
        block_time=int(block_time) if block_time is not None else None,
    )


class TransactionFetcher:
    """Fetches one transaction by signature. Failures yield the zero record plus an error."""

    def __init__(
        self,
        explorer_api: ExplorerApiClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            explorer_api: Explorer API client (injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._explorer = explorer_api
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def fetch(self, signature: str) -> FetchResult[TransactionRecord]:
        try:
            detail = await self._explorer.get_transaction(signature)
            record = record_from_detail(signature, detail)
        except (TrackerAPIError, ValueError, TypeError, AttributeError) as e:
            self._logger.warning(
                "transaction_fetch_failed",
                tx_signature=signature,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return FetchResult(value=TransactionRecord.empty(signature), error=str(e))

        self._logger.debug(
            "transaction_fetched",
            tx_signature=signature,
            tx_accounts=len(record.account_keys),
            tx_token_balances=len(record.post_token_balances),
            tx_block_time=record.block_time,
        )
        return FetchResult(value=record)
