# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from solana_sales_tracker.config import Settings
from solana_sales_tracker.models.mint_metadata import Creator, MintMetadata
from solana_sales_tracker.models.sale_event import NftInfo, SaleEvent
from solana_sales_tracker.persistence.repositories.key_value import (
    KeyValueProcessedSignatureRepository,
    KeyValueSalesRecordRepository,
)
from solana_sales_tracker.persistence.storage import InMemoryKeyValueStore

ROYALTY_ACCOUNT = "Vote111111111111111111111111111111111111111"
UPDATE_AUTHORITY = "Stake11111111111111111111111111111111111111"
MINT = "So11111111111111111111111111111111111111112"
BUYER = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
SELLER = "SysvarRent111111111111111111111111111111111"
MAGIC_EDEN = "M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K"


@pytest.fixture
def royalty_account() -> str:
    """Primary royalties account (tracked account) used by tests."""
    return ROYALTY_ACCOUNT


@pytest.fixture
def update_authority() -> str:
    """Update authority of the tracked collection."""
    return UPDATE_AUTHORITY


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with the tracked collection configured and easy overrides per section."""

    def _build(**overrides: Any) -> Settings:
        tracking: dict[str, Any] = {
            "primary_royalties_account": ROYALTY_ACCOUNT,
            "update_authority": UPDATE_AUTHORITY,
        }
        tracking.update(overrides.pop("tracking", {}))
        storage: dict[str, Any] = {"backend": "memory"}
        storage.update(overrides.pop("storage", {}))
        return Settings.from_env(tracking=tracking, storage=storage, **overrides)

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Fresh in-memory key/value store per test."""
    return InMemoryKeyValueStore()


@pytest.fixture
def ledger_repo(store: InMemoryKeyValueStore) -> KeyValueProcessedSignatureRepository:
    return KeyValueProcessedSignatureRepository(store)


@pytest.fixture
def sales_repo(store: InMemoryKeyValueStore) -> KeyValueSalesRecordRepository:
    return KeyValueSalesRecordRepository(store)


@pytest.fixture
def metadata_factory() -> Callable[..., MintMetadata]:
    """Build MintMetadata of a genuine collection item, with overrides."""

    def _build(**overrides: Any) -> MintMetadata:
        return MintMetadata(
            update_authority=overrides.pop("update_authority", UPDATE_AUTHORITY),
            mint=overrides.pop("mint", MINT),
            name=overrides.pop("name", "Tracked #42"),
            uri=overrides.pop("uri", "https://arweave.net/asset-42"),
            symbol=overrides.pop("symbol", "TRK"),
            seller_fee_basis_points=overrides.pop("seller_fee_basis_points", 500),
            creators=overrides.pop(
                "creators",
                (Creator(address=ROYALTY_ACCOUNT, verified=True, share=100),),
            ),
        )

    return _build


@pytest.fixture
def sale_factory() -> Callable[..., SaleEvent]:
    """Build SaleEvent with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> SaleEvent:
        return SaleEvent(
            time=overrides.pop("time", 1_633_089_600),
            tx_signature=overrides.pop("tx_signature", "sig-1"),
            market_place=overrides.pop("market_place", "Magic Eden"),
            buyer=overrides.pop("buyer", BUYER),
            seller=overrides.pop("seller", SELLER),
            sale_amount=overrides.pop("sale_amount", "2.50"),
            nft_info=overrides.pop(
                "nft_info",
                NftInfo(
                    mint=MINT,
                    id="Tracked #42",
                    name="Tracked #42",
                    image="https://arweave.net/image-42.png",
                ),
            ),
        )

    return _build
