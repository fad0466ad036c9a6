"""Metaplex metadata resolution: PDA derivation, account fetch and decoding."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

import structlog
from construct import (
    Bytes,
    ConstructError,
    Flag,
    If,
    Int8ul,
    Int16ul,
    Int32ul,
    PascalString,
    PrefixedArray,
    Struct,
    this,
)
from solders.pubkey import Pubkey

from solana_sales_tracker.exceptions import MetadataDecodeError, MintMetadataNotFound
from solana_sales_tracker.models.mint_metadata import Creator, MintMetadata

if TYPE_CHECKING:
    from solana_sales_tracker.clients.rpc_client import RpcClient

METADATA_PROGRAM_ID = Pubkey.from_string("metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s")
METADATA_SEED = b"metadata"

CREATOR_STRUCT = Struct(
    "address" / Bytes(32),
    "verified" / Flag,
    "share" / Int8ul,
)

# Metadata account prefix: the fields after the creators list are not read.
METADATA_STRUCT = Struct(
    "key" / Int8ul,
    "update_authority" / Bytes(32),
    "mint" / Bytes(32),
    "name" / PascalString(Int32ul, "utf8"),
    "symbol" / PascalString(Int32ul, "utf8"),
    "uri" / PascalString(Int32ul, "utf8"),
    "seller_fee_basis_points" / Int16ul,
    "has_creators" / Flag,
    "creators" / If(this.has_creators, PrefixedArray(Int32ul, CREATOR_STRUCT)),
)


class IMintMetadataResolver(Protocol):
    """Capability used by NFTValidator: mint address in, decoded metadata out."""

    async def resolve(self, mint: str) -> MintMetadata: ...


def metadata_address(mint: Pubkey) -> Pubkey:
    """Derive the metadata PDA of a mint (seeds: "metadata", program id, mint)."""
    pda, _ = Pubkey.find_program_address(
        [METADATA_SEED, bytes(METADATA_PROGRAM_ID), bytes(mint)],
        METADATA_PROGRAM_ID,
    )
    return pda


def _clean(value: str) -> str:
    return value.replace("\x00", "").strip()


def decode_metadata(data: bytes) -> MintMetadata:
    """Decode a Metaplex metadata account.

    Raises:
        MetadataDecodeError: If data does not parse as a metadata account.
    """
    try:
        parsed = METADATA_STRUCT.parse(data)
    except (ConstructError, UnicodeDecodeError) as e:
        raise MetadataDecodeError(f"Invalid metadata account ({len(data)} bytes): {e}") from e

    creators = tuple(
        Creator(
            address=str(Pubkey(bytes(c.address))),
            verified=bool(c.verified),
            share=int(c.share),
        )
        for c in (parsed.creators or [])
    )
    return MintMetadata(
        update_authority=str(Pubkey(bytes(parsed.update_authority))),
        mint=str(Pubkey(bytes(parsed.mint))),
        name=_clean(parsed.name),
        uri=_clean(parsed.uri),
        symbol=_clean(parsed.symbol),
        seller_fee_basis_points=int(parsed.seller_fee_basis_points),
        creators=creators,
    )


class MintMetadataResolver:
    """Reads a mint's metadata account over JSON-RPC and decodes it."""

    def __init__(
        self,
        rpc_client: RpcClient,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            rpc_client: Solana JSON-RPC client (injected).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._rpc = rpc_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def resolve(self, mint: str) -> MintMetadata:
        """Return the decoded metadata of mint.

        Raises:
            MintMetadataNotFound: If mint is not an address or has no metadata account.
            MetadataDecodeError: If the account data cannot be decoded.
            TrackerAPIError: If the RPC request fails.
            RpcError: If the RPC node returns an error.
        """
        try:
            mint_key = Pubkey.from_string(mint)
        except ValueError as e:
            raise MintMetadataNotFound(mint) from e

        address = metadata_address(mint_key)
        data = await self._rpc.get_account_info(str(address))
        if data is None:
            raise MintMetadataNotFound(mint)

        metadata = decode_metadata(data)
        self._logger.debug(
            "mint_metadata_resolved",
            nft_mint=mint,
            nft_name=metadata.name,
            nft_update_authority=metadata.update_authority,
            nft_creators=len(metadata.creators),
        )
        return metadata
