"""Validation helpers for Solana addresses."""

from __future__ import annotations

from typing import Any

from solders.pubkey import Pubkey


def is_solana_address(addr: Any) -> bool:
    """Return True if addr is a base58-encoded 32-byte public key."""
    if not isinstance(addr, str):
        return False
    s = addr.strip()
    if not 32 <= len(s) <= 44:
        return False
    try:
        Pubkey.from_string(s)
        return True
    except ValueError:
        return False


def mask_address(addr: str | None) -> str:
    """Return a masked address or signature for logging (e.g. 7xKX...AsU9)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:4]}...{addr[-4:]}"
