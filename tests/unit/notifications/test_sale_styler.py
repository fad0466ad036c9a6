# -*- coding: utf-8 -*-
"""Unit tests for SaleStyler."""

from __future__ import annotations

import json
from collections.abc import Callable

from solana_sales_tracker.config import Settings
from solana_sales_tracker.models.sale_event import SaleEvent
from solana_sales_tracker.notifications.stylers import SaleStyler


def test_render_json_is_indented_wire_form(
    settings: Settings,
    sale_factory: Callable[..., SaleEvent],
) -> None:
    sale = sale_factory()

    text = SaleStyler(settings).render_json(sale)

    assert json.loads(text) == sale.to_dict()
    assert '\n  "txSignature": "sig-1"' in text


def test_discord_payload(settings: Settings, sale_factory: Callable[..., SaleEvent]) -> None:
    sale = sale_factory()

    payload = SaleStyler(settings).discord_payload(sale)

    assert payload["username"] == "NFT Sales Bot"
    embed = payload["embeds"][0]
    assert embed["title"] == "Tracked #42 → SOLD"
    assert embed["url"] == "https://explorer.solana.com/tx/sig-1"
    assert embed["color"] == 14303591
    assert embed["thumbnail"] == {"url": "https://arweave.net/image-42.png"}
    assert embed["timestamp"] == "2021-10-01T12:00:00+00:00"
    fields = {f["name"]: f["value"] for f in embed["fields"]}
    assert fields == {
        "Price": "2.50",
        "Seller": sale.seller,
        "Buyer": sale.buyer,
        "Transaction ID": "sig-1",
        "Marketplace": "Magic Eden",
    }


def test_discord_marketplace_is_mint_when_royalty_account_sells(
    settings: Settings,
    sale_factory: Callable[..., SaleEvent],
    royalty_account: str,
) -> None:
    payload = SaleStyler(settings).discord_payload(sale_factory(seller=royalty_account))

    fields = {f["name"]: f["value"] for f in payload["embeds"][0]["fields"]}
    assert fields["Marketplace"] == "Mint"


def test_tweet_for_secondary_sale(settings: Settings, sale_factory: Callable[..., SaleEvent]) -> None:
    text = SaleStyler(settings).render_tweet(sale_factory())

    assert text == (
        "Tracked #42 purchased for 2.50 SOL 🚀 ➡️ https://solscan.io/tx/sig-1\n\n#Solana #NFT"
    )


def test_tweet_for_mint_with_project_tag_and_website(
    settings_factory: Callable[..., Settings],
    sale_factory: Callable[..., SaleEvent],
    royalty_account: str,
) -> None:
    settings = settings_factory(
        twitter={
            "is_holder": True,
            "project_friendly_name": "Tracked Apes",
            "project_website": "tracked.example",
        }
    )

    text = SaleStyler(settings).render_tweet(sale_factory(seller=royalty_account))

    assert text.startswith("Tracked #42 minted for 2.50 SOL at tracked.example 🚀")
    assert text.endswith("#TrackedApes #Solana #NFT")


def test_render_html_escapes_and_includes_details(
    settings: Settings,
    sale_factory: Callable[..., SaleEvent],
) -> None:
    text = SaleStyler(settings).render_html(sale_factory(market_place="<Shop>"))

    assert "<b>Tracked #42 → SOLD</b>" in text
    assert "2.50 SOL" in text
    assert "&lt;Shop&gt;" in text
    assert "https://explorer.solana.com/tx/sig-1" in text
