# -*- coding: utf-8 -*-
"""Console sink (print-based)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from solana_sales_tracker.notifications.strategies.base import BaseSaleSink
from solana_sales_tracker.config import Settings

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.notifications.stylers.sale_styler import SaleStyler


class ConsoleSink(BaseSaleSink):
    """Print each sale to stdout as indented JSON."""

    def __init__(
        self,
        settings: "Settings",
        styler: "SaleStyler"
    ) -> None:
        super().__init__(settings)
        self._running = False
        self._styler = styler

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def send(self, sale: "SaleEvent") -> None:
        """Print the sale to the console."""
        if not self.is_running or not self.settings.console.enabled:
            return
        print(self._styler.render_json(sale))
