"""Solana JSON-RPC client for on-chain account reads (getAccountInfo)."""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import structlog

from solana_sales_tracker.exceptions import RpcError
from solana_sales_tracker.utils.validation import mask_address

if TYPE_CHECKING:
    from solana_sales_tracker.clients.http import AsyncHttpClient
    from solana_sales_tracker.config import Settings


class RpcClient:
    """Client for Solana JSON-RPC. Used to read Metaplex metadata accounts."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the RPC client.

        Args:
            http_client: HTTP client for POST requests (JSON-RPC).
            settings: Configuration (uses settings.api.rpc_url).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _rpc_url(self) -> str:
        return self._settings.api.rpc_url.rstrip("/")

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call and return its ``result``.

        Raises:
            TrackerAPIError: If the HTTP request fails.
            RpcError: If the response contains an error object or is malformed.
        """
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        response = await self._http.post(self._rpc_url(), json=payload)
        if not isinstance(response, dict):
            raise RpcError(f"Unexpected RPC response type: {type(response).__name__}")
        resp_dict = cast(dict[str, Any], response)
        if "error" in resp_dict:
            err = resp_dict["error"]
            if isinstance(err, dict):
                err_d = cast(dict[str, Any], err)
                raise RpcError(str(err_d.get("message", err_d)), code=err_d.get("code"))
            raise RpcError(str(err))
        return resp_dict.get("result")

    async def get_account_info(self, address: str) -> bytes | None:
        """Return the raw data of an account, or None if the account does not exist.

        Args:
            address: Account address (base58).

        Returns:
            Decoded account data bytes.
        """
        result = await self.call("getAccountInfo", [address, {"encoding": "base64"}])
        value = result.get("value") if isinstance(result, dict) else None
        if value is None:
            self._logger.debug("rpc_account_not_found", account_masked=mask_address(address))
            return None
        data = cast(dict[str, Any], value).get("data")
        if not isinstance(data, list) or not data:
            raise RpcError(f"Unexpected account data for {address}")
        encoded = cast(list[Any], data)[0]
        try:
            return base64.b64decode(encoded)
        except (TypeError, ValueError) as e:
            raise RpcError(f"Invalid base64 account data for {address}") from e
