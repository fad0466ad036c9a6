# -*- coding: utf-8 -*-
"""Sale rendering for each output channel (JSON, Telegram HTML, tweet, Discord embed)."""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent


MINT_MARKETPLACE = "Mint"


class SaleStyler:
    """Render a SaleEvent for delivery.

    A sale whose seller is the primary royalties account is a primary mint:
    the marketplace is shown as "Mint" and tweets say "minted".
    """

    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def is_mint(self, sale: "SaleEvent") -> bool:
        return sale.seller == self._settings.tracking.primary_royalties_account

    def marketplace_label(self, sale: "SaleEvent") -> str:
        return MINT_MARKETPLACE if self.is_mint(sale) else sale.market_place

    def render_json(self, sale: "SaleEvent") -> str:
        """Pretty JSON of the camelCase wire form."""
        return json.dumps(sale.to_dict(), indent=2, ensure_ascii=False)

    def render_tweet(self, sale: "SaleEvent") -> str:
        cfg = self._settings.twitter
        action = "minted" if self.is_mint(sale) else "purchased"
        website = f"at {cfg.project_website} " if cfg.project_website else ""
        project_tag = ""
        if cfg.is_holder and cfg.project_friendly_name:
            project_tag = f"#{cfg.project_friendly_name.replace(' ', '')} "
        return (
            f"{sale.nft_info.id} {action} for {sale.sale_amount} SOL {website}"
            f"🚀 ➡️ {cfg.tx_url}{sale.tx_signature}\n\n"
            f"{project_tag}#Solana #NFT"
        )

    def render_html(self, sale: "SaleEvent") -> str:
        """Telegram message (HTML parse mode)."""
        lines = [
            f"🟢 <b>{html.escape(sale.nft_info.id)} → SOLD</b>\n",
            self._section(
                "💰 Sale",
                [
                    ("💵 Price", f"{sale.sale_amount} SOL"),
                    ("🏪 Marketplace", self.marketplace_label(sale)),
                    ("🕒 Time", self._format_timestamp(sale.time)),
                ],
            ),
            self._section(
                "👥 Parties",
                [
                    ("🧾 Seller", sale.seller),
                    ("🛒 Buyer", sale.buyer),
                ],
            ),
            self._section(
                "🔗 Transaction",
                [("", self._tx_url(sale))],
            ),
        ]
        return "\n".join([line for line in lines if line]).strip()

    def discord_payload(self, sale: "SaleEvent") -> dict[str, Any]:
        """Webhook body with a single embed."""
        cfg = self._settings.discord
        embed: dict[str, Any] = {
            "author": {"name": cfg.username},
            "fields": [
                {"name": "Price", "value": sale.sale_amount},
                {"name": "Seller", "value": sale.seller, "inline": True},
                {"name": "Buyer", "value": sale.buyer, "inline": True},
                {"name": "Transaction ID", "value": sale.tx_signature, "inline": False},
                {"name": "Marketplace", "value": self.marketplace_label(sale), "inline": False},
            ],
            "color": cfg.color,
            "title": f"{sale.nft_info.id} → SOLD",
            "url": self._tx_url(sale),
        }
        if sale.nft_info.image:
            embed["thumbnail"] = {"url": sale.nft_info.image}
        if sale.time is not None:
            embed["timestamp"] = self._format_timestamp(sale.time)
        return {"username": cfg.username, "embeds": [embed]}

    def _tx_url(self, sale: "SaleEvent") -> str:
        return f"{self._settings.tracking.explorer_tx_url}{sale.tx_signature}"

    @staticmethod
    def _section(header: str, rows: list[tuple[str, Any]]) -> str:
        """Format a section with a bold header and labelled rows; empty rows are skipped."""
        content_lines: list[str] = []
        for label, value in rows:
            if not value:
                continue
            text = html.escape(str(value))
            if label:
                emoji, _, remainder = label.partition(" ")
                content_lines.append(f"{emoji} <b>{remainder}:</b> {text}")
            else:
                content_lines.append(text)
        if not content_lines:
            return ""
        emoji, _, remainder = header.partition(" ")
        return "\n".join([f"{emoji} <b>{remainder}</b>\n{'─'*12}", *content_lines]) + "\n"

    @staticmethod
    def _format_timestamp(value: int | None) -> str:
        """Format epoch seconds into ISO-8601 UTC."""
        if value is None:
            return ""
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
        except (OSError, OverflowError, ValueError):
            return str(value)
