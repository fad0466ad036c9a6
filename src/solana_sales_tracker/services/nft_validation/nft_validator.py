"""NFT authenticity check against the tracked collection's authorities."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from solana_sales_tracker.exceptions import MintMetadataNotFound
from solana_sales_tracker.models.results import ValidationOutcome

if TYPE_CHECKING:
    from solana_sales_tracker.config import Settings
    from solana_sales_tracker.models.mint_metadata import MintMetadata
    from solana_sales_tracker.services.nft_validation.metadata_resolver import (
        IMintMetadataResolver,
    )


class NFTValidator:
    """Decides whether a mint belongs to the tracked collection.

    A mint is verified when its update authority equals the configured
    update authority and, if tracking.require_royalty_creator is set, the
    primary royalties account is one of its creators. A mint without a
    metadata account is not an NFT; other resolution errors propagate.
    """

    def __init__(
        self,
        metadata_resolver: IMintMetadataResolver,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            metadata_resolver: Mint metadata source (injected).
            settings: Application settings (uses settings.tracking authorities and policy).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._resolver = metadata_resolver
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def check(self, metadata: MintMetadata) -> str | None:
        """Return the rejection reason for metadata, or None when it passes."""
        tr = self._settings.tracking
        if metadata.update_authority != tr.update_authority:
            return "update_authority_mismatch"
        if tr.require_royalty_creator and tr.primary_royalties_account not in metadata.creator_addresses:
            return "royalty_account_not_creator"
        return None

    async def validate(self, mint: str) -> ValidationOutcome:
        if not mint:
            return ValidationOutcome(status="not_nft", reason="no_mint")

        try:
            metadata = await self._resolver.resolve(mint)
        except MintMetadataNotFound:
            self._logger.info("nft_validation_no_metadata", nft_mint=mint)
            return ValidationOutcome(status="not_nft", reason="no_metadata")
        reason = self.check(metadata)
        if reason is not None:
            self._logger.info(
                "nft_validation_rejected",
                nft_mint=mint,
                nft_update_authority=metadata.update_authority,
                nft_rejection_reason=reason,
            )
            return ValidationOutcome(status="rejected", metadata=metadata, reason=reason)
        return ValidationOutcome(status="verified", metadata=metadata)
