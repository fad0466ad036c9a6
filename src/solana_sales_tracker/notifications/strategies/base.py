# -*- coding: utf-8 -*-
"""Base output sink for detected sales."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.config.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent


class BaseSaleSink(ABC):
    """Abstract base class for sale output sinks."""

    def __init__(self, settings: "Settings"):
        """
        Initialize the base sink.

        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the sink is ready to send."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the sink (clients, sessions)."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Release the sink's resources."""
        pass

    @abstractmethod
    async def send(self, sale: "SaleEvent") -> None:
        """
        Deliver one sale.

        Args:
            sale: Detected sale (SaleEvent)
        """
        pass
