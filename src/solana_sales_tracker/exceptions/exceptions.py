"""Custom exceptions for upstream APIs, metadata resolution and tracking."""

from __future__ import annotations


class SalesTrackerError(Exception):
    """Base exception for sales-tracker errors."""

    pass


class MissingRequiredConfigError(SalesTrackerError):
    """Raised when a required configuration value is missing."""

    pass


class TrackerAPIError(SalesTrackerError):
    """Raised when an upstream HTTP request fails after retries."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class RateLimitError(TrackerAPIError):
    """Raised when the API returns HTTP 429 (Too Many Requests)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded (429)",
        *,
        url: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=429)
        self.retry_after = retry_after


class RpcError(SalesTrackerError):
    """Raised when a Solana JSON-RPC response carries an error object."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class MintMetadataNotFound(SalesTrackerError):
    """Raised when a mint has no Metaplex metadata account."""

    def __init__(self, mint: str) -> None:
        super().__init__(f"No metadata account for mint {mint}")
        self.mint = mint


class MetadataDecodeError(SalesTrackerError):
    """Raised when a metadata account cannot be decoded."""

    pass


class AssetMetadataError(SalesTrackerError):
    """Raised when the off-chain asset JSON referenced by a mint cannot be fetched."""

    def __init__(self, uri: str, cause: Exception | None = None) -> None:
        super().__init__(f"Failed to fetch asset metadata from {uri!r}")
        self.uri = uri
        self.cause = cause


class StorageError(SalesTrackerError):
    """Raised when the key/value store cannot read, write or prepare its backing storage."""

    def __init__(self, message: str, *, key: str | None = None, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.cause = cause
