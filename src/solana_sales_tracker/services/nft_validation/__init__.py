"""NFT metadata resolution and authenticity checks."""

from solana_sales_tracker.services.nft_validation.metadata_resolver import (
    METADATA_PROGRAM_ID,
    IMintMetadataResolver,
    MintMetadataResolver,
    decode_metadata,
    metadata_address,
)
from solana_sales_tracker.services.nft_validation.nft_validator import NFTValidator

__all__ = [
    "IMintMetadataResolver",
    "METADATA_PROGRAM_ID",
    "MintMetadataResolver",
    "NFTValidator",
    "decode_metadata",
    "metadata_address",
]
