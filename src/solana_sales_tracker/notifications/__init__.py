"""Sale output subsystem."""

from solana_sales_tracker.notifications.dispatcher import SaleDispatcher
from solana_sales_tracker.notifications.strategies import (
    BaseSaleSink,
    ConsoleSink,
    DiscordSink,
    SalesRecordSink,
    TelegramSink,
    TwitterSink,
)
from solana_sales_tracker.notifications.stylers import SaleStyler

__all__ = [
    "BaseSaleSink",
    "ConsoleSink",
    "DiscordSink",
    "SaleDispatcher",
    "SaleStyler",
    "SalesRecordSink",
    "TelegramSink",
    "TwitterSink",
]
