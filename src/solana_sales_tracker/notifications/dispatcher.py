"""Sale dispatcher: delivers each sale to every configured sink."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from solana_sales_tracker.notifications.strategies import BaseSaleSink

if TYPE_CHECKING:
    from solana_sales_tracker.models.sale_event import SaleEvent


@dataclass
class SaleDispatcher:
    """Send sales to all sinks, sequentially in configured order.

    A failing sink is logged and skipped; the remaining sinks still receive
    the sale and the failure does not reach the caller.
    """

    sinks: list[BaseSaleSink]
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _logger: Any = field(init=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("SaleDispatcher")

    async def initialize(self) -> None:
        """Initialize all sinks."""
        for sink in self.sinks:
            await sink.initialize()
        if not self.sinks:
            self._logger.info("sale_dispatcher_no_sinks")
            return
        self._logger.debug(
            "sale_dispatcher_initialized",
            sale_sinks=[sink.name for sink in self.sinks],
        )

    async def shutdown(self) -> None:
        """Shutdown all sinks."""
        for sink in self.sinks:
            await sink.shutdown()
        self._logger.debug("sale_dispatcher_shutdown_complete")

    async def dispatch(self, sale: SaleEvent) -> list[str]:
        """Send sale to every sink.

        Returns:
            Names of the sinks that failed.
        """
        failed: list[str] = []
        for sink in self.sinks:
            try:
                await sink.send(sale)
            except Exception as e:
                failed.append(sink.name)
                self._logger.exception(
                    "sale_sink_failed",
                    sale_sink=sink.name,
                    tx_signature=sale.tx_signature,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
        self._logger.debug(
            "sale_dispatched",
            tx_signature=sale.tx_signature,
            sale_sinks_count=len(self.sinks),
            sale_sinks_failed=len(failed),
        )
        return failed
