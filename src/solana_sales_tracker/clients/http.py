# -*- coding: utf-8 -*-
"""Async HTTP client with timeout, retries and rate-limit handling."""

from __future__ import annotations

import asyncio
import random
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Literal, Optional
from structlog.contextvars import bound_contextvars

from solana_sales_tracker.config import Settings
from solana_sales_tracker.exceptions import RateLimitError, TrackerAPIError

HttpMethod = Literal["GET", "POST"]


class AsyncHttpClient:
    """Async HTTP client for the explorer, the RPC node and off-chain metadata hosts.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager. Every request carries the total timeout
    from settings.api.timeout_seconds; a timeout counts as a failed attempt.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (timeout, max_retries).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped at 4 seconds."""
        base = min(4.0, 0.25 * (2**attempt))
        return base + random.uniform(0.0, 0.15)

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Raises:
            RateLimitError: If 429 is returned on every attempt.
            TrackerAPIError: If the request fails after all retries.
        """
        return await self._request("GET", url, params=params or {}, headers=headers)

    async def post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a POST request with a JSON body and return parsed JSON (None for empty bodies).

        Raises:
            RateLimitError: If 429 is returned on every attempt.
            TrackerAPIError: If the request fails after all retries.
        """
        return await self._request("POST", url, json=json or {}, headers=headers)

    async def _request(
        self,
        method: HttpMethod,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        request_id = uuid.uuid4().hex[:12]
        max_retries = self._settings.api.max_retries
        last_error: Optional[Exception] = None
        retry_after: Optional[float] = None
        event_prefix = f"http_{method.lower()}"

        with bound_contextvars(
            http_method=method,
            http_url=url,
            http_request_id=request_id,
            http_max_retries=max_retries,
        ):
            for attempt in range(max_retries):
                with bound_contextvars(http_attempt=attempt + 1):
                    try:
                        session = await self._get_session()
                        async with session.request(
                            method, url, params=params, json=json, headers=headers
                        ) as response:
                            if response.status == 429:
                                retry_after = _parse_retry_after(response.headers.get("Retry-After"))
                                last_error = None
                                self._logger.warning(
                                    f"{event_prefix}_rate_limited",
                                    http_status_code=429,
                                    http_retry_after_seconds=retry_after,
                                )
                                if attempt + 1 < max_retries:
                                    await asyncio.sleep(
                                        retry_after if retry_after else self._backoff_delay(attempt)
                                    )
                                continue

                            response.raise_for_status()
                            if response.content_length == 0:
                                return None
                            return await response.json(content_type=None)
                    except aiohttp.ClientResponseError as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                            http_status_code=e.status,
                        )
                    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                        )
                    if attempt + 1 < max_retries:
                        await asyncio.sleep(self._backoff_delay(attempt))

            if last_error is None:
                self._logger.warning(f"{event_prefix}_rate_limit_exhausted", http_attempts=max_retries)
                raise RateLimitError(url=url, retry_after=retry_after)

            status_code = (
                last_error.status if isinstance(last_error, aiohttp.ClientResponseError) else None
            )
            self._logger.warning(
                f"{event_prefix}_failed",
                http_status_code=status_code,
                http_attempts=max_retries,
                error_type=type(last_error).__name__,
                error_message=str(last_error),
            )
            raise TrackerAPIError(
                f"{method} failed after {max_retries} attempts: {url}",
                url=url,
                status_code=status_code,
                cause=last_error,
            ) from last_error


def _parse_retry_after(header: Optional[str]) -> Optional[float]:
    if not header:
        return None
    try:
        value = float(header)
    except ValueError:
        return None
    return value if value > 0 else None
