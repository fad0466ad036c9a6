# -*- coding: utf-8 -*-
"""Unit tests for HistoryCursor."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

from solana_sales_tracker.clients.explorer_api import ExplorerApiClient
from solana_sales_tracker.config import Settings
from solana_sales_tracker.exceptions import TrackerAPIError
from solana_sales_tracker.services.history import HistoryCursor


def _page(*signatures: str) -> list[dict[str, Any]]:
    return [{"txHash": s} for s in signatures]


def _history_explorer(history: list[str]) -> Any:
    """Fake explorer over a newest-first history, honouring limit and before_hash."""

    async def get_account_transactions(
        account: str, *, limit: int = 50, before_hash: str | None = None
    ) -> list[dict[str, Any]]:
        start = history.index(before_hash) + 1 if before_hash else 0
        return _page(*history[start : start + limit])

    return SimpleNamespace(get_account_transactions=AsyncMock(side_effect=get_account_transactions))


async def test_stops_at_until_signature_and_returns_oldest_first(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(
        get_account_transactions=AsyncMock(return_value=_page("S9", "S8", "S7", "S6", "S5", "S4"))
    )
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S5")

    assert batch.signatures == ("S6", "S7", "S8", "S9")
    assert batch.reached_until is True
    assert batch.partial is False
    explorer.get_account_transactions.assert_awaited_once_with("acct", limit=50, before_hash=None)


async def test_cold_start_caps_at_twenty_five(settings: Settings) -> None:
    history = [f"S{i}" for i in range(200, 0, -1)]
    explorer = _history_explorer(history)
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct")

    assert len(batch.signatures) == 25
    assert batch.signatures[0] == "S176"
    assert batch.signatures[-1] == "S200"
    assert batch.reached_until is False
    assert explorer.get_account_transactions.await_count == 1


async def test_resume_caps_at_one_hundred_and_pages_with_before_hash(settings: Settings) -> None:
    history = [f"S{i}" for i in range(300, 0, -1)]
    explorer = _history_explorer(history)
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S1")

    assert len(batch.signatures) == 100
    assert batch.signatures[-1] == "S300"
    assert batch.signatures[0] == "S201"
    calls = explorer.get_account_transactions.await_args_list
    assert len(calls) == 2
    assert calls[0].kwargs["before_hash"] is None
    assert calls[1].kwargs["before_hash"] == "S251"


async def test_caps_follow_settings(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory(tracking={"cold_start_max": 3, "page_size": 2})
    explorer = _history_explorer(["S5", "S4", "S3", "S2", "S1"])
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct")

    assert batch.signatures == ("S3", "S4", "S5")
    assert batch.pages_fetched == 2


async def test_until_signature_on_a_later_page(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory(tracking={"page_size": 2})
    explorer = _history_explorer(["S5", "S4", "S3", "S2", "S1"])
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S2")

    assert batch.signatures == ("S3", "S4", "S5")
    assert batch.reached_until is True
    assert batch.pages_fetched == 2


async def test_stops_on_empty_page(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(
        get_account_transactions=AsyncMock(side_effect=[_page("S3", "S2", "S1"), []])
    )
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S0")

    assert batch.signatures == ("S1", "S2", "S3")
    assert batch.reached_until is False
    assert explorer.get_account_transactions.await_count == 2


async def test_no_history_returns_empty_batch(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(get_account_transactions=AsyncMock(return_value=[]))
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct")

    assert batch.signatures == ()
    assert batch.pages_fetched == 0


async def test_upstream_failure_returns_partial_batch(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(
        get_account_transactions=AsyncMock(
            side_effect=[_page("S3", "S2"), TrackerAPIError("boom", status_code=500)]
        )
    )
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S0")

    assert batch.signatures == ("S2", "S3")
    assert batch.partial is True
    assert batch.error == "boom"


async def test_failure_on_first_page_returns_empty_partial_batch(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(
        get_account_transactions=AsyncMock(side_effect=TrackerAPIError("down"))
    )
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("acct")

    assert batch.signatures == ()
    assert batch.error == "down"


async def test_empty_account_does_not_call_explorer(settings: Settings) -> None:
    explorer: Any = SimpleNamespace(get_account_transactions=AsyncMock())
    cursor = HistoryCursor(explorer, settings)

    batch = await cursor.fetch_new_signatures("")

    assert batch.signatures == ()
    explorer.get_account_transactions.assert_not_awaited()


async def test_error_body_from_explorer_is_recorded_as_partial(settings: Settings) -> None:
    http: Any = SimpleNamespace(
        get=AsyncMock(side_effect=[[{"txHash": "S3"}, {"txHash": "S2"}], {"error": "rate limited"}])
    )
    cursor = HistoryCursor(ExplorerApiClient(http, settings), settings)

    batch = await cursor.fetch_new_signatures("acct", until_signature="S0")

    assert batch.signatures == ("S2", "S3")
    assert batch.partial is True
    assert batch.error is not None
