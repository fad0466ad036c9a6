# -*- coding: utf-8 -*-
"""Telegram sink: posts each sale to a chat, with the NFT image when there is one."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import timedelta
from functools import partial
from typing import TYPE_CHECKING, Any, Optional

import structlog
from telegram import Bot
from telegram.error import BadRequest, Forbidden, RetryAfter, TelegramError
from telegram.request import HTTPXRequest

from solana_sales_tracker.notifications.strategies.base import BaseSaleSink

if TYPE_CHECKING:
    from solana_sales_tracker.config.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.notifications.stylers.sale_styler import SaleStyler

# Telegram rejects photo captions longer than this.
CAPTION_LIMIT = 1024

# BadRequest subclasses NetworkError in python-telegram-bot, so these must be
# matched before any retryable error.
PERMANENT_ERRORS: tuple[type[TelegramError], ...] = (BadRequest, Forbidden)


class TelegramSink(BaseSaleSink):
    """Sale announcement as a photo with an HTML caption, or a text message without an image.

    Sends are spaced to settings.telegram.messages_per_minute. Flood-control
    (RetryAfter) waits the requested time; other transient errors are retried
    with exponential backoff up to max_retries. Permanent errors (bad request,
    bot blocked or not in the chat) and exhausted retries raise, so the
    dispatcher reports this sink as failed for the sale.
    """

    def __init__(
        self,
        settings: "Settings",
        styler: "SaleStyler",
        *,
        bot: Optional[Bot] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        cfg = self.settings.telegram
        if not cfg.api_key or not cfg.chat_id:
            raise ValueError("TelegramSink requires telegram.api_key and telegram.chat_id.")
        self._styler = styler
        self._cfg = cfg
        self._chat_id = str(cfg.chat_id)
        self._bot = bot
        self._running = False
        self._last_sent_at: Optional[float] = None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        if self._running:
            return
        if self._bot is None:
            request = HTTPXRequest(
                connect_timeout=self._cfg.connect_timeout,
                read_timeout=self._cfg.read_timeout,
                write_timeout=self._cfg.write_timeout,
                pool_timeout=self._cfg.pool_timeout,
            )
            self._bot = Bot(token=str(self._cfg.api_key), request=request)
        self._running = True

    async def shutdown(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._bot is not None:
            await self._bot.shutdown()

    async def send(self, sale: "SaleEvent") -> None:
        """Announce one sale.

        Raises:
            RuntimeError: If the sink was not initialized.
            TelegramError: On a permanent error, or when retries are exhausted.
        """
        if not self._running or self._bot is None:
            raise RuntimeError("TelegramSink is not initialized")
        bot = self._bot
        caption = self._styler.render_html(sale)
        image = sale.nft_info.image

        call: Callable[[], Awaitable[Any]]
        if image and self._cfg.send_image and len(caption) <= CAPTION_LIMIT:
            kind = "photo"
            call = partial(
                bot.send_photo, chat_id=self._chat_id, photo=image, caption=caption, parse_mode="HTML"
            )
        else:
            kind = "message"
            call = partial(bot.send_message, chat_id=self._chat_id, text=caption, parse_mode="HTML")

        await self._with_retries(call, kind=kind, tx_signature=sale.tx_signature)

    async def _with_retries(
        self,
        call: Callable[[], Awaitable[Any]],
        *,
        kind: str,
        tx_signature: str,
    ) -> None:
        attempts = self._cfg.max_retries + 1
        for attempt in range(1, attempts + 1):
            await self._pace()
            try:
                await call()
            except PERMANENT_ERRORS as e:
                self._logger.error(
                    "telegram_sale_rejected",
                    telegram_kind=kind,
                    tx_signature=tx_signature,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            except TelegramError as e:
                if attempt == attempts:
                    raise
                delay = self._retry_delay(e, attempt)
                self._logger.warning(
                    "telegram_sale_retry",
                    telegram_kind=kind,
                    tx_signature=tx_signature,
                    attempt=attempt,
                    max_attempts=attempts,
                    delay_seconds=delay,
                    error_type=type(e).__name__,
                )
                await asyncio.sleep(delay)
            else:
                self._logger.info("telegram_sale_sent", telegram_kind=kind, tx_signature=tx_signature)
                return

    def _retry_delay(self, error: TelegramError, attempt: int) -> float:
        if isinstance(error, RetryAfter):
            retry_after = error.retry_after
            if isinstance(retry_after, timedelta):
                return retry_after.total_seconds()
            return float(retry_after)
        return min(60.0, self._cfg.backoff_base_seconds * (2 ** (attempt - 1)))

    async def _pace(self) -> None:
        """Keep at least 60 / messages_per_minute seconds between sends."""
        interval = 60.0 / self._cfg.messages_per_minute
        now = time.monotonic()
        if self._last_sent_at is not None:
            wait = self._last_sent_at + interval - now
            if wait > 0:
                await asyncio.sleep(wait)
        self._last_sent_at = time.monotonic()
