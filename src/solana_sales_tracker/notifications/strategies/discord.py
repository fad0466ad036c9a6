# -*- coding: utf-8 -*-
"""Discord webhook sink."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional

from solana_sales_tracker.notifications.strategies.base import BaseSaleSink

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.clients.http import AsyncHttpClient
    from solana_sales_tracker.config.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.notifications.stylers.sale_styler import SaleStyler


class DiscordSink(BaseSaleSink):
    """Post each sale as an embed to a Discord channel webhook."""

    def __init__(
        self,
        settings: "Settings",
        http_client: "AsyncHttpClient",
        styler: "SaleStyler",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        cfg = self.settings.discord
        if not cfg.enabled or not cfg.webhook_url:
            raise ValueError("DiscordSink requires webhook_url.")
        self.webhook_url: str = cfg.webhook_url
        self._http = http_client
        self._styler = styler
        self._running = False
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send(self, sale: "SaleEvent") -> None:
        """Post the webhook payload.

        Raises:
            TrackerAPIError: If the webhook request fails after retries.
        """
        if not self._running:
            self._logger.warning("discord_not_running_cannot_send")
            return
        payload = self._styler.discord_payload(sale)
        await self._http.post(self.webhook_url, json=payload)
        self._logger.debug("discord_sale_sent", tx_signature=sale.tx_signature)
