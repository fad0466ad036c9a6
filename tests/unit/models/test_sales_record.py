# -*- coding: utf-8 -*-
"""Unit tests for SaleEvent and SalesRecord."""

from __future__ import annotations

from collections.abc import Callable

from solana_sales_tracker.models.sale_event import SaleEvent
from solana_sales_tracker.models.sales_record import SalesRecord


def test_sale_event_wire_form_is_camel_case(sale_factory: Callable[..., SaleEvent]) -> None:
    sale = sale_factory()

    data = sale.to_dict()

    assert data["txSignature"] == "sig-1"
    assert data["marketPlace"] == "Magic Eden"
    assert data["saleAmount"] == "2.50"
    assert data["nftInfo"]["id"] == "Tracked #42"
    assert SaleEvent.from_dict(data) == sale


def test_classify_mint_when_seller_is_update_authority(
    sale_factory: Callable[..., SaleEvent],
    update_authority: str,
) -> None:
    sale = sale_factory(seller=update_authority)

    record = SalesRecord.classify(sale, update_authority)

    assert record.type == "mint"
    assert record.tx_signature == "sig-1"


def test_classify_secondary_otherwise(
    sale_factory: Callable[..., SaleEvent],
    update_authority: str,
) -> None:
    record = SalesRecord.classify(sale_factory(), update_authority)

    assert record.type == "secondary"
    assert SalesRecord.from_dict(record.to_dict()) == record
