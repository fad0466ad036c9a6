# -*- coding: utf-8 -*-
"""Twitter sink: media upload plus status update, OAuth 1.0a user context."""

from __future__ import annotations

import asyncio
import base64
import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional

import requests
from requests.adapters import HTTPAdapter, Retry
from requests_oauthlib import OAuth1

from solana_sales_tracker.exceptions import TrackerAPIError
from solana_sales_tracker.notifications.strategies.base import BaseSaleSink

if TYPE_CHECKING:  # pragma: no cover
    from solana_sales_tracker.config.config import Settings
    from solana_sales_tracker.models.sale_event import SaleEvent
    from solana_sales_tracker.notifications.stylers.sale_styler import SaleStyler


class TwitterSink(BaseSaleSink):
    """Tweet each sale with the NFT image attached.

    requests is blocking; calls run in a worker thread via asyncio.to_thread.
    """

    def __init__(
        self,
        settings: "Settings",
        styler: "SaleStyler",
        *,
        session: Optional[requests.Session] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._styler = styler

        cfg = self.settings.twitter
        credentials = (
            cfg.consumer_api_key,
            cfg.consumer_api_secret,
            cfg.oauth_token,
            cfg.oauth_secret,
        )
        if not cfg.enabled or not all(credentials):
            raise ValueError("TwitterSink requires consumer key/secret and oauth token/secret.")

        self._auth = OAuth1(*credentials)
        self.upload_url = cfg.upload_url
        self.status_url = cfg.status_url
        self.timeout = self.settings.api.timeout_seconds
        self._session = session
        self._owns_session = session is None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        if self._running:
            self._logger.warning("twitter_already_running")
            return
        if self._session is None:
            retry = Retry(
                total=self.settings.api.max_retries,
                backoff_factor=0.5,
                status_forcelist=(500, 502, 503, 504),
                allowed_methods=("GET",),
            )
            self._session = requests.Session()
            self._session.mount("https://", HTTPAdapter(max_retries=retry))
            self._session.mount("http://", HTTPAdapter(max_retries=retry))
        self._running = True

    async def shutdown(self) -> None:
        if not self._running:
            return
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None
        self._running = False

    async def send(self, sale: "SaleEvent") -> None:
        """Upload the image (if any) and post the status.

        Raises:
            TrackerAPIError: If a Twitter or image request fails.
        """
        if not self._running:
            self._logger.warning("twitter_not_running_cannot_send")
            return
        status = self._styler.render_tweet(sale)
        media_id: Optional[str] = None
        if sale.nft_info.image:
            media_id = await asyncio.to_thread(self._upload_image, sale.nft_info.image)
        tweet_id = await asyncio.to_thread(self._post_status, status, media_id)
        self._logger.info(
            "twitter_sale_posted",
            tx_signature=sale.tx_signature,
            twitter_media_id=media_id,
            twitter_status_id=tweet_id,
        )

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if self._session is None:
            raise RuntimeError("TwitterSink not initialized")
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TrackerAPIError(
                f"{method} {url} failed with status {status_code}",
                url=url,
                status_code=status_code,
                cause=e,
            ) from e
        except requests.RequestException as e:
            raise TrackerAPIError(f"{method} {url} failed", url=url, cause=e) from e
        return response

    def _upload_image(self, image_url: str) -> str:
        image = self._request("GET", image_url).content
        media_data = base64.b64encode(image).decode("ascii")
        response = self._request(
            "POST", self.upload_url, auth=self._auth, data={"media_data": media_data}
        )
        media_id = (response.json() or {}).get("media_id_string")
        if not media_id:
            raise TrackerAPIError("media upload returned no media_id_string", url=self.upload_url)
        return str(media_id)

    def _post_status(self, status: str, media_id: Optional[str]) -> Optional[str]:
        data: dict[str, str] = {"status": status}
        if media_id:
            data["media_ids"] = media_id
        response = self._request("POST", self.status_url, auth=self._auth, data=data)
        return (response.json() or {}).get("id_str")
