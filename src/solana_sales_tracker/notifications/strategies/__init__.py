"""Sale output sinks."""

from solana_sales_tracker.notifications.strategies.base import BaseSaleSink
from solana_sales_tracker.notifications.strategies.console import ConsoleSink
from solana_sales_tracker.notifications.strategies.discord import DiscordSink
from solana_sales_tracker.notifications.strategies.sales_record import SalesRecordSink
from solana_sales_tracker.notifications.strategies.telegram import TelegramSink
from solana_sales_tracker.notifications.strategies.twitter import TwitterSink

__all__ = [
    "BaseSaleSink",
    "ConsoleSink",
    "DiscordSink",
    "SalesRecordSink",
    "TelegramSink",
    "TwitterSink",
]
