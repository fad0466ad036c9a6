# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, API__EXPLORER_HOST.
Complex values (TRACKING__MARKETPLACES) are given as JSON.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AckPolicy = Literal["before_emit", "after_emit"]


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "solana-sales-tracker"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/sales_tracker.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Configuration for the explorer API and the Solana JSON-RPC endpoint (HTTP)."""

    model_config = SettingsConfigDict(extra="ignore")

    explorer_host: str = Field(
        default="https://public-api.solscan.io",
        description="Explorer API base URL (account history and transaction detail).",
    )
    explorer_api_key: Optional[str] = Field(
        default=None,
        description="Optional explorer API token, sent as the 'token' header.",
    )
    rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com",
        description="Solana JSON-RPC endpoint used for mint metadata lookups.",
    )
    timeout_seconds: float = Field(
        default=60.0,
        ge=1.0,
        le=300.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Maximum number of attempts for failed requests.",
    )


class MarketplaceInfo(BaseModel):
    """A marketplace and the addresses that identify it in a transaction."""

    name: str
    addresses: list[str] = Field(default_factory=list)


def _default_marketplaces() -> list[MarketplaceInfo]:
    return [
        MarketplaceInfo(
            name="Magic Eden",
            addresses=[
                "M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K",
                "MEisE1HzehtrDpAAT8PnLHjpSSkRYakotTuJRPjTpo8",
            ],
        ),
        MarketplaceInfo(
            name="Solanart",
            addresses=["CJsLwbP1iu5DuUikHEJnLfANgKy6stB2uFgvBBHoyxwz"],
        ),
    ]


class TrackingSettings(BaseSettings):
    """Configuration for sales tracking of one collection."""

    model_config = SettingsConfigDict(extra="ignore")

    primary_royalties_account: str = Field(
        default="",
        description="Account receiving royalties; its history is polled. Env: TRACKING__PRIMARY_ROYALTIES_ACCOUNT.",
    )
    update_authority: str = Field(
        default="",
        description="Update authority of the tracked collection (authenticity anchor).",
    )
    marketplaces: list[MarketplaceInfo] = Field(
        default_factory=_default_marketplaces,
        description="Ordered marketplace definitions; first match wins. JSON in env.",
    )
    require_royalty_creator: bool = Field(
        default=True,
        description="Also require the royalties account among the mint creators.",
    )
    ack_policy: AckPolicy = Field(
        default="after_emit",
        description="When to mark a signature processed relative to sale emission.",
    )
    page_size: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Signatures requested per explorer page.",
    )
    cold_start_max: int = Field(
        default=25,
        ge=1,
        le=1000,
        description="Signature cap when no signature was processed before.",
    )
    max_signatures: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Signature cap when resuming from the last processed signature.",
    )
    ledger_max_size: int = Field(
        default=300,
        ge=2,
        description="Processed-signature ledger size that triggers compaction.",
    )
    ledger_keep: int = Field(
        default=10,
        ge=1,
        description="Most recent signatures kept after compaction.",
    )
    explorer_tx_url: str = Field(
        default="https://explorer.solana.com/tx/",
        description="Transaction link prefix used in Discord embeds.",
    )

    @model_validator(mode="after")
    def _check_ledger_policy(self) -> TrackingSettings:
        if self.ledger_keep >= self.ledger_max_size:
            raise ValueError("tracking.ledger_keep must be smaller than tracking.ledger_max_size")
        return self


class StorageSettings(BaseSettings):
    """Key/value storage backing the processed ledger and the sales records."""

    model_config = SettingsConfigDict(extra="ignore")

    backend: Literal["file", "memory", "cos"] = "file"
    root_dir: str = Field(default=".", description="Root directory for the file backend.")
    cos_endpoint: Optional[str] = Field(default=None, description="Object storage endpoint URL.")
    cos_bucket: Optional[str] = Field(default=None, description="Bucket holding the ledger and sales records.")
    cos_api_key: Optional[str] = Field(default=None, description="IBM Cloud API key for the object storage instance.")
    cos_resource_instance_id: Optional[str] = Field(default=None, description="Object storage service instance id.")
    cos_auth_endpoint: str = "https://iam.cloud.ibm.com/identity/token"
    cos_storage_class: Optional[str] = Field(
        default=None,
        description="LocationConstraint used when the bucket has to be created, e.g. us-standard.",
    )

    @model_validator(mode="after")
    def _check_cos(self) -> StorageSettings:
        if self.backend == "cos":
            missing = [
                name
                for name in ("cos_endpoint", "cos_bucket", "cos_api_key")
                if not getattr(self, name)
            ]
            if missing:
                raise ValueError(f"storage backend 'cos' requires {', '.join(missing)}")
        return self


class ConsoleSinkSettings(BaseSettings):
    """Console output settings."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True


class SalesRecordSinkSettings(BaseSettings):
    """Sales record output (persisted list of recorded sales)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False


class DiscordSinkSettings(BaseSettings):
    """Discord webhook output (from env DISCORD__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    webhook_url: Optional[str] = Field(default=None, description="Discord channel webhook URL.")
    username: str = "NFT Sales Bot"
    color: int = 14303591


class TwitterSinkSettings(BaseSettings):
    """Twitter output, OAuth 1.0a user context (from env TWITTER__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    consumer_api_key: Optional[str] = None
    consumer_api_secret: Optional[str] = None
    oauth_token: Optional[str] = None
    oauth_secret: Optional[str] = None
    upload_url: str = "https://upload.twitter.com/1.1/media/upload.json"
    status_url: str = "https://api.twitter.com/1.1/statuses/update.json"
    tx_url: str = "https://solscan.io/tx/"
    project_friendly_name: Optional[str] = None
    project_website: Optional[str] = None
    is_holder: bool = False


class TelegramSinkSettings(BaseSettings):
    """Telegram output (from env TELEGRAM__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = False
    api_key: Optional[str] = Field(default=None, description="Telegram bot API key.")
    chat_id: Optional[str] = Field(default=None, description="Telegram chat ID.")
    send_image: bool = Field(default=True, description="Post the NFT image with the sale as caption.")
    messages_per_minute: int = Field(default=30, ge=1, le=120)
    max_retries: int = Field(default=5, ge=0, le=20)
    backoff_base_seconds: float = Field(default=1.0, ge=0.1, le=60.0)
    connect_timeout: float = Field(default=10.0, ge=0.1, le=60.0)
    read_timeout: float = Field(default=20.0, ge=0.1, le=120.0)
    write_timeout: float = Field(default=20.0, ge=0.1, le=120.0)
    pool_timeout: float = Field(default=10.0, ge=0.1, le=60.0)


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, TRACKING__UPDATE_AUTHORITY.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    tracking: TrackingSettings = Field(default_factory=TrackingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    console: ConsoleSinkSettings = Field(default_factory=ConsoleSinkSettings)
    sales_record: SalesRecordSinkSettings = Field(default_factory=SalesRecordSinkSettings)
    discord: DiscordSinkSettings = Field(default_factory=DiscordSinkSettings)
    twitter: TwitterSinkSettings = Field(default_factory=TwitterSinkSettings)
    telegram: TelegramSinkSettings = Field(default_factory=TelegramSinkSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(tracking={"update_authority": "..."})
        - from_env(api={"timeout_seconds": 30})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from solana_sales_tracker.config import get_settings

        settings = get_settings()
        royalties = settings.tracking.primary_royalties_account
    """
    return Settings()
