# -*- coding: utf-8 -*-
"""Unit tests for address validation helpers."""

from __future__ import annotations

import pytest

from solana_sales_tracker.utils import is_solana_address, mask_address


@pytest.mark.parametrize(
    "addr",
    [
        "So11111111111111111111111111111111111111112",
        "M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K",
        " 11111111111111111111111111111111 ",
    ],
)
def test_valid_addresses(addr: str) -> None:
    assert is_solana_address(addr) is True


@pytest.mark.parametrize("addr", ["", "short", "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706", None, 42])
def test_invalid_addresses(addr: object) -> None:
    assert is_solana_address(addr) is False


def test_mask_address() -> None:
    assert mask_address("M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K") == "M2mx...aF7K"
    assert mask_address("short") == "***"
    assert mask_address(None) == "***"
