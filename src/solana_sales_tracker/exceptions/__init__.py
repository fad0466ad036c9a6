"""Exceptions subpackage."""

from solana_sales_tracker.exceptions.exceptions import (
    AssetMetadataError,
    MetadataDecodeError,
    MintMetadataNotFound,
    MissingRequiredConfigError,
    RateLimitError,
    RpcError,
    SalesTrackerError,
    StorageError,
    TrackerAPIError,
)

__all__ = [
    "AssetMetadataError",
    "MetadataDecodeError",
    "MintMetadataNotFound",
    "MissingRequiredConfigError",
    "RateLimitError",
    "RpcError",
    "SalesTrackerError",
    "StorageError",
    "TrackerAPIError",
]
