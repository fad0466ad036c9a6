"""History cursor: paginates an account's signatures back to a stop-token."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from typing import TYPE_CHECKING, Any

import structlog

from solana_sales_tracker.exceptions import TrackerAPIError
from solana_sales_tracker.models.results import SignatureBatch
from solana_sales_tracker.utils.validation import mask_address

if TYPE_CHECKING:
    from solana_sales_tracker.clients.explorer_api import ExplorerApiClient
    from solana_sales_tracker.config import Settings


class HistoryCursor:
    """Collects signatures newer than `until_signature`, newest first from upstream, returned oldest first.

    The cap is settings.tracking.cold_start_max (25) without a stop-token and
    settings.tracking.max_signatures (100) with one. Pages are requested with
    the last collected signature as `beforeHash`. Pagination stops on an empty
    page, on reaching the stop-token (excluded), or at the cap. An upstream
    failure ends pagination and the signatures collected so far are returned
    with the error recorded on the batch.
    """

    def __init__(
        self,
        explorer_api: ExplorerApiClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the cursor.

        Args:
            explorer_api: Explorer API client (injected).
            settings: Application settings (uses settings.tracking page size and caps).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._explorer = explorer_api
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def max_count(self, until_signature: str | None) -> int:
        tr = self._settings.tracking
        return tr.max_signatures if until_signature else tr.cold_start_max

    async def iter_pages(
        self,
        account: str,
        *,
        before: str | None = None,
    ) -> AsyncIterator[list[str]]:
        """Yield pages of signatures (newest first) going back in history from `before`.

        Ends after an empty page. Upstream errors propagate to the consumer.
        """
        page_size = self._settings.tracking.page_size
        cursor = before
        while True:
            items = await self._explorer.get_account_transactions(
                account, limit=page_size, before_hash=cursor
            )
            page = [tx_hash for item in items if (tx_hash := item.get("txHash"))]
            if not page:
                return
            yield page
            cursor = page[-1]

    async def fetch_new_signatures(
        self,
        account: str,
        until_signature: str | None = None,
    ) -> SignatureBatch:
        """Return signatures newer than until_signature, oldest first, bounded by the cap.

        Args:
            account: Tracked account address.
            until_signature: Last processed signature (exclusive stop-token), if any.
        """
        account_masked = mask_address(account)
        if not account:
            self._logger.warning("history_cursor_no_account")
            return SignatureBatch()

        max_count = self.max_count(until_signature)
        self._logger.info(
            "history_cursor_started",
            account_masked=account_masked,
            history_until_signature=until_signature,
            history_max_count=max_count,
        )

        collected: list[str] = []
        pages = 0
        reached_until = False
        error: str | None = None
        try:
            async with aclosing(self.iter_pages(account)) as page_iter:
                async for page in page_iter:
                    pages += 1
                    self._logger.debug(
                        "history_cursor_page_fetched",
                        account_masked=account_masked,
                        history_page=pages,
                        history_page_size=len(page),
                    )
                    for signature in page:
                        if until_signature and signature == until_signature:
                            reached_until = True
                            break
                        collected.append(signature)
                        if len(collected) >= max_count:
                            break
                    if reached_until or len(collected) >= max_count:
                        break
        except (TrackerAPIError, ValueError) as e:
            error = str(e)
            self._logger.warning(
                "history_cursor_aborted",
                account_masked=account_masked,
                history_collected=len(collected),
                error_type=type(e).__name__,
                error_message=error,
            )

        collected.reverse()
        self._logger.info(
            "history_cursor_completed",
            account_masked=account_masked,
            history_signatures=len(collected),
            history_pages=pages,
            history_reached_until=reached_until,
        )
        return SignatureBatch(
            signatures=tuple(collected),
            reached_until=reached_until,
            pages_fetched=pages,
            error=error,
        )
