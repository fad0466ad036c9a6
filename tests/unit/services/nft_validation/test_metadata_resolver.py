# -*- coding: utf-8 -*-
"""Unit tests for Metaplex metadata decoding and MintMetadataResolver."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest
from solders.pubkey import Pubkey

from solana_sales_tracker.exceptions import MetadataDecodeError, MintMetadataNotFound
from solana_sales_tracker.services.nft_validation.metadata_resolver import (
    METADATA_PROGRAM_ID,
    METADATA_STRUCT,
    MintMetadataResolver,
    decode_metadata,
    metadata_address,
)

MINT = "So11111111111111111111111111111111111111112"
UPDATE_AUTHORITY = "Stake11111111111111111111111111111111111111"
CREATOR = "Vote111111111111111111111111111111111111111"


def _account_data(*, with_creators: bool = True) -> bytes:
    creators = (
        [{"address": bytes(Pubkey.from_string(CREATOR)), "verified": True, "share": 100}]
        if with_creators
        else None
    )
    return METADATA_STRUCT.build(
        {
            "key": 4,
            "update_authority": bytes(Pubkey.from_string(UPDATE_AUTHORITY)),
            "mint": bytes(Pubkey.from_string(MINT)),
            "name": "Tracked #42" + "\x00" * 21,
            "symbol": "TRK" + "\x00" * 7,
            "uri": "https://arweave.net/asset-42" + "\x00" * 172,
            "seller_fee_basis_points": 500,
            "has_creators": with_creators,
            "creators": creators,
        }
    )


def test_decode_metadata_strips_padding_and_reads_creators() -> None:
    metadata = decode_metadata(_account_data())

    assert metadata.update_authority == UPDATE_AUTHORITY
    assert metadata.mint == MINT
    assert metadata.name == "Tracked #42"
    assert metadata.symbol == "TRK"
    assert metadata.uri == "https://arweave.net/asset-42"
    assert metadata.seller_fee_basis_points == 500
    assert metadata.creator_addresses == (CREATOR,)
    assert metadata.creators[0].verified is True
    assert metadata.creators[0].share == 100


def test_decode_metadata_without_creators() -> None:
    metadata = decode_metadata(_account_data(with_creators=False))

    assert metadata.creators == ()


def test_decode_metadata_ignores_trailing_fields() -> None:
    metadata = decode_metadata(_account_data() + b"\x01\x00\xff" * 10)

    assert metadata.name == "Tracked #42"


def test_decode_truncated_data_raises() -> None:
    with pytest.raises(MetadataDecodeError):
        decode_metadata(_account_data()[:50])


def test_metadata_address_is_program_derived() -> None:
    mint = Pubkey.from_string(MINT)

    address = metadata_address(mint)

    assert address == metadata_address(mint)
    assert address != metadata_address(Pubkey.from_string(CREATOR))
    assert not address.is_on_curve()
    expected, _ = Pubkey.find_program_address(
        [b"metadata", bytes(METADATA_PROGRAM_ID), bytes(mint)], METADATA_PROGRAM_ID
    )
    assert address == expected


async def test_resolve_reads_metadata_account() -> None:
    rpc: Any = SimpleNamespace(get_account_info=AsyncMock(return_value=_account_data()))
    resolver = MintMetadataResolver(rpc)

    metadata = await resolver.resolve(MINT)

    assert metadata.name == "Tracked #42"
    rpc.get_account_info.assert_awaited_once_with(
        str(metadata_address(Pubkey.from_string(MINT)))
    )


async def test_resolve_missing_account_raises() -> None:
    rpc: Any = SimpleNamespace(get_account_info=AsyncMock(return_value=None))

    with pytest.raises(MintMetadataNotFound):
        await MintMetadataResolver(rpc).resolve(MINT)


async def test_resolve_invalid_mint_raises_without_rpc_call() -> None:
    rpc: Any = SimpleNamespace(get_account_info=AsyncMock())

    with pytest.raises(MintMetadataNotFound):
        await MintMetadataResolver(rpc).resolve("not-a-mint")
    rpc.get_account_info.assert_not_awaited()
