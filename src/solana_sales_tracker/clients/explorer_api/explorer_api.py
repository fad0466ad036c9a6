# -*- coding: utf-8 -*-
"""Solana explorer API client (account history and transaction detail)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional, cast
from structlog.contextvars import bound_contextvars

from solana_sales_tracker.clients.explorer_api.schema import (
    AccountTransactionSchema,
    TransactionDetailSchema,
)
from solana_sales_tracker.config import Settings
from solana_sales_tracker.utils.validation import mask_address

if TYPE_CHECKING:
    from solana_sales_tracker.clients.http import AsyncHttpClient


class ExplorerApiClient:
    """Client for the explorer endpoints /account/transactions and /transaction/<signature>."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.api.explorer_host, explorer_api_key).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.explorer_host.rstrip("/")

    def _headers(self) -> dict[str, str] | None:
        token = self._settings.api.explorer_api_key
        return {"token": token} if token else None

    async def get_account_transactions(
        self,
        account: str,
        *,
        limit: int = 50,
        before_hash: Optional[str] = None,
    ) -> list[AccountTransactionSchema]:
        """Fetch one page of an account's transactions (most recent first).

        Args:
            account: Account address (base58).
            limit: Page size.
            before_hash: Return only transactions older than this signature.

        Returns:
            List of transaction items; non-dict entries are dropped.

        Raises:
            TrackerAPIError: If the request fails after retries.
            ValueError: If the response body is not a JSON array.
        """
        with bound_contextvars(
            explorer_account_masked=mask_address(account),
            explorer_limit=limit,
            explorer_before_hash=before_hash,
        ):
            params: dict[str, Any] = {"limit": limit, "account": account}
            if before_hash:
                params["beforeHash"] = before_hash
            data = await self._http.get(
                f"{self._base_url()}/account/transactions",
                params=params,
                headers=self._headers(),
            )
            if not isinstance(data, list):
                self._logger.warning(
                    "explorer_get_account_transactions_non_list",
                    explorer_response_type=type(data).__name__,
                )
                raise ValueError(
                    f"Unexpected account transactions type: {type(data).__name__}"
                )
            return [
                cast(AccountTransactionSchema, x)
                for x in cast(list[Any], data)
                if isinstance(x, dict)
            ]

    async def get_transaction(self, signature: str) -> TransactionDetailSchema:
        """Fetch transaction detail for one signature.

        Raises:
            TrackerAPIError: If the request fails after retries.
            ValueError: If the response is not a JSON object.
        """
        with bound_contextvars(explorer_signature=signature):
            data = await self._http.get(
                f"{self._base_url()}/transaction/{signature}",
                headers=self._headers(),
            )
            if not isinstance(data, dict):
                raise ValueError(
                    f"Unexpected transaction detail type: {type(data).__name__}"
                )
            return cast(TransactionDetailSchema, data)
