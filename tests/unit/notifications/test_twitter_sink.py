# -*- coding: utf-8 -*-
"""Unit tests for TwitterSink."""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from solana_sales_tracker.config import Settings
from solana_sales_tracker.exceptions import TrackerAPIError
from solana_sales_tracker.models.sale_event import NftInfo, SaleEvent
from solana_sales_tracker.notifications.strategies import TwitterSink
from solana_sales_tracker.notifications.stylers import SaleStyler

UPLOAD_URL = "https://upload.twitter.com/1.1/media/upload.json"
STATUS_URL = "https://api.twitter.com/1.1/statuses/update.json"


@pytest.fixture
def twitter_settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory(
        twitter={
            "enabled": True,
            "consumer_api_key": "ck",
            "consumer_api_secret": "cs",
            "oauth_token": "ot",
            "oauth_secret": "os",
        }
    )


def _response(*, content: bytes = b"", json_body: Any = None) -> MagicMock:
    response = MagicMock()
    response.content = content
    response.json.return_value = json_body
    response.raise_for_status.return_value = None
    return response


async def test_send_uploads_image_then_posts_status(
    twitter_settings: Settings,
    sale_factory: Callable[..., SaleEvent],
) -> None:
    session = MagicMock()
    session.request.side_effect = [
        _response(content=b"png-bytes"),
        _response(json_body={"media_id_string": "m-1"}),
        _response(json_body={"id_str": "t-1"}),
    ]
    styler = SaleStyler(twitter_settings)
    sink = TwitterSink(twitter_settings, styler, session=session)
    await sink.initialize()
    sale = sale_factory()

    await sink.send(sale)

    get_call, upload_call, status_call = session.request.call_args_list
    assert get_call.args == ("GET", "https://arweave.net/image-42.png")
    assert upload_call.args == ("POST", UPLOAD_URL)
    assert upload_call.kwargs["data"] == {
        "media_data": base64.b64encode(b"png-bytes").decode("ascii")
    }
    assert status_call.args == ("POST", STATUS_URL)
    assert status_call.kwargs["data"] == {
        "status": styler.render_tweet(sale),
        "media_ids": "m-1",
    }


async def test_send_without_image_posts_status_only(
    twitter_settings: Settings,
    sale_factory: Callable[..., SaleEvent],
) -> None:
    session = MagicMock()
    session.request.return_value = _response(json_body={"id_str": "t-1"})
    sink = TwitterSink(twitter_settings, SaleStyler(twitter_settings), session=session)
    await sink.initialize()

    await sink.send(sale_factory(nft_info=NftInfo(mint="m", id="Tracked #1", name="Tracked #1")))

    assert session.request.call_count == 1
    assert "media_ids" not in session.request.call_args.kwargs["data"]


async def test_http_error_is_raised_as_tracker_api_error(
    twitter_settings: Settings,
    sale_factory: Callable[..., SaleEvent],
) -> None:
    failing = MagicMock()
    failing.status_code = 403
    failing.raise_for_status.side_effect = requests.HTTPError(response=failing)
    session = MagicMock()
    session.request.return_value = failing
    sink = TwitterSink(twitter_settings, SaleStyler(twitter_settings), session=session)
    await sink.initialize()

    with pytest.raises(TrackerAPIError) as exc_info:
        await sink.send(sale_factory())
    assert exc_info.value.status_code == 403


async def test_shutdown_keeps_injected_session_open(twitter_settings: Settings) -> None:
    session = MagicMock()
    sink = TwitterSink(twitter_settings, SaleStyler(twitter_settings), session=session)
    await sink.initialize()

    await sink.shutdown()

    session.close.assert_not_called()
    assert sink.is_running is False


def test_missing_credentials_raise(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory(twitter={"enabled": True, "consumer_api_key": "ck"})

    with pytest.raises(ValueError):
        TwitterSink(settings, SaleStyler(settings))
