# -*- coding: utf-8 -*-
"""Unit tests for NFTValidator."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from solana_sales_tracker.config import Settings
from solana_sales_tracker.exceptions import MintMetadataNotFound, RpcError
from solana_sales_tracker.models.mint_metadata import Creator, MintMetadata
from solana_sales_tracker.services.nft_validation import NFTValidator


def _resolver(metadata: MintMetadata) -> Any:
    return SimpleNamespace(resolve=AsyncMock(return_value=metadata))


async def test_genuine_mint_is_verified(
    settings: Settings,
    metadata_factory: Callable[..., MintMetadata],
) -> None:
    metadata = metadata_factory()
    validator = NFTValidator(_resolver(metadata), settings)

    outcome = await validator.validate("mint-1")

    assert outcome.status == "verified"
    assert outcome.verified is True
    assert outcome.metadata == metadata


async def test_update_authority_mismatch_is_rejected(
    settings: Settings,
    metadata_factory: Callable[..., MintMetadata],
) -> None:
    validator = NFTValidator(_resolver(metadata_factory(update_authority="someone-else")), settings)

    outcome = await validator.validate("mint-1")

    assert outcome.status == "rejected"
    assert outcome.verified is False
    assert outcome.reason == "update_authority_mismatch"


async def test_royalty_account_must_be_a_creator_by_default(
    settings: Settings,
    metadata_factory: Callable[..., MintMetadata],
) -> None:
    metadata = metadata_factory(creators=(Creator(address="other-creator", share=100),))
    validator = NFTValidator(_resolver(metadata), settings)

    outcome = await validator.validate("mint-1")

    assert outcome.status == "rejected"
    assert outcome.reason == "royalty_account_not_creator"


async def test_creator_check_can_be_disabled(
    settings_factory: Callable[..., Settings],
    metadata_factory: Callable[..., MintMetadata],
) -> None:
    settings = settings_factory(tracking={"require_royalty_creator": False})
    validator = NFTValidator(_resolver(metadata_factory(creators=())), settings)

    outcome = await validator.validate("mint-1")

    assert outcome.verified is True


async def test_empty_mint_is_not_an_nft(settings: Settings) -> None:
    resolver: Any = SimpleNamespace(resolve=AsyncMock())
    validator = NFTValidator(resolver, settings)

    outcome = await validator.validate("")

    assert outcome.status == "not_nft"
    resolver.resolve.assert_not_awaited()


async def test_mint_without_metadata_account_is_not_an_nft(settings: Settings) -> None:
    resolver: Any = SimpleNamespace(resolve=AsyncMock(side_effect=MintMetadataNotFound("mint-1")))
    validator = NFTValidator(resolver, settings)

    outcome = await validator.validate("mint-1")

    assert outcome.status == "not_nft"
    assert outcome.reason == "no_metadata"
    assert outcome.metadata is None


async def test_rpc_errors_propagate(settings: Settings) -> None:
    resolver: Any = SimpleNamespace(resolve=AsyncMock(side_effect=RpcError("node unavailable")))
    validator = NFTValidator(resolver, settings)

    with pytest.raises(RpcError):
        await validator.validate("mint-1")
