"""Configuration subpackage."""

from solana_sales_tracker.config.config import (
    AckPolicy,
    ApiSettings,
    AppSettings,
    ConsoleSinkSettings,
    DiscordSinkSettings,
    LoggingSettings,
    MarketplaceInfo,
    SalesRecordSinkSettings,
    Settings,
    StorageSettings,
    TelegramSinkSettings,
    TrackingSettings,
    TwitterSinkSettings,
    get_settings,
)

__all__ = [
    "AckPolicy",
    "ApiSettings",
    "AppSettings",
    "ConsoleSinkSettings",
    "DiscordSinkSettings",
    "LoggingSettings",
    "MarketplaceInfo",
    "SalesRecordSinkSettings",
    "Settings",
    "StorageSettings",
    "TelegramSinkSettings",
    "TrackingSettings",
    "TwitterSinkSettings",
    "get_settings",
]
