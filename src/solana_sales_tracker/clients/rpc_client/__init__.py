"""Solana JSON-RPC client."""

from solana_sales_tracker.clients.rpc_client.rpc_client import RpcClient

__all__ = ["RpcClient"]
