# -*- coding: utf-8 -*-
"""Sales record sink: appends each sale to the tracked account's sales records."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional

from solana_sales_tracker.models.sales_record import SalesRecord
from solana_sales_tracker.notifications.strategies.base import BaseSaleSink

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.config.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.persistence.repositories.interfaces.sales_record_repository import (
        ISalesRecordRepository,
    )


class SalesRecordSink(BaseSaleSink):
    """Record sales classified as mint or secondary; re-emitted signatures are skipped."""

    def __init__(
        self,
        settings: "Settings",
        repository: "ISalesRecordRepository",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._repository = repository
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
        if not self._running or not self.settings.sales_record.enabled:
            return
        tr = self.settings.tracking
        record = SalesRecord.classify(sale, tr.update_authority)
        added = await self._repository.add(tr.primary_royalties_account, record)
        self._logger.debug(
            "sales_record_sink_sent",
            tx_signature=sale.tx_signature,
            sale_type=record.type,
            sales_record_added=added,
        )
