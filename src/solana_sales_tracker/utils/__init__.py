# -*- coding: utf-8 -*-
"""Utility modules."""

from solana_sales_tracker.utils.validation import is_solana_address, mask_address

__all__ = ["is_solana_address", "mask_address"]
