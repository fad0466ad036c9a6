"""Sale info builder: assembles a SaleEvent from analysis, metadata and off-chain asset JSON."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog

from solana_sales_tracker.exceptions import AssetMetadataError, TrackerAPIError
from solana_sales_tracker.models.sale_event import UNKNOWN_MARKETPLACE, NftInfo, SaleEvent

if TYPE_CHECKING:
    from solana_sales_tracker.clients.http import AsyncHttpClient
    from solana_sales_tracker.models.balance_diff import BalanceDiffResult
    from solana_sales_tracker.models.mint_metadata import MintMetadata


class SaleInfoBuilder:
    """Builds the SaleEvent for a qualifying, verified transaction."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            http_client: HTTP client used to fetch the asset JSON at the metadata uri.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def fetch_asset(self, uri: str) -> dict[str, Any]:
        """GET the off-chain asset JSON (name, image, ...).

        Raises:
            AssetMetadataError: If the request fails or the body is not a JSON object.
        """
        if not uri:
            raise AssetMetadataError(uri)
        try:
            data = await self._http.get(uri)
        except TrackerAPIError as e:
            raise AssetMetadataError(uri, e) from e
        if not isinstance(data, dict):
            raise AssetMetadataError(uri)
        return cast(dict[str, Any], data)

    async def build(
        self,
        signature: str,
        diff: BalanceDiffResult,
        metadata: MintMetadata,
        marketplace: str,
        block_time: int | None,
    ) -> SaleEvent:
        asset = await self.fetch_asset(metadata.uri)
        image = asset.get("image")
        sale = SaleEvent(
            time=block_time,
            tx_signature=signature,
            market_place=marketplace or UNKNOWN_MARKETPLACE,
            buyer=diff.buyer,
            seller=diff.seller,
            sale_amount=diff.sale_amount,
            nft_info=NftInfo(
                mint=diff.mint_info,
                id=metadata.name,
                name=str(asset.get("name") or metadata.name),
                image=str(image) if image else None,
            ),
        )
        self._logger.debug(
            "sale_info_built",
            tx_signature=signature,
            nft_mint=sale.nft_info.mint,
            nft_id=sale.nft_info.id,
            sale_amount=sale.sale_amount,
            sale_marketplace=sale.market_place,
        )
        return sale
