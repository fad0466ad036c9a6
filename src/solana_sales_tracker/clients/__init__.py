"""HTTP and API clients."""

from solana_sales_tracker.clients.explorer_api import ExplorerApiClient
from solana_sales_tracker.clients.http import AsyncHttpClient
from solana_sales_tracker.clients.rpc_client import RpcClient

__all__ = [
    "AsyncHttpClient",
    "ExplorerApiClient",
    "RpcClient",
]
