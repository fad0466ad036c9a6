# -*- coding: utf-8 -*-
"""Recorded sales stored as a JSON document in a key/value store."""

from __future__ import annotations

import builtins
import json
from collections.abc import Callable
from typing import Any

import structlog

from solana_sales_tracker.models.sales_record import SalesRecord
from solana_sales_tracker.persistence.repositories.interfaces.sales_record_repository import (
    ISalesRecordRepository,
)
from solana_sales_tracker.persistence.storage.base import IKeyValueStore


def sales_file_key(account: str) -> str:
    """Storage key of the sales records for account."""
    return f"sales/records-{account.strip()}.json"


class KeyValueSalesRecordRepository(ISalesRecordRepository):
    """Document shape: {"sales": [{"type": "mint"|"secondary", "data": {...}}, ...]}."""

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._store = store
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _read_raw(self, account: str) -> builtins.list[dict[str, Any]]:
        raw = await self._store.read(sales_file_key(account))
        if raw is None:
            return []
        data = json.loads(raw)
        sales = data.get("sales") if isinstance(data, dict) else None
        return [s for s in sales if isinstance(s, dict)] if isinstance(sales, builtins.list) else []

    async def list(self, account: str) -> builtins.list[SalesRecord]:
        return [SalesRecord.from_dict(s) for s in await self._read_raw(account)]

    async def add(self, account: str, record: SalesRecord) -> bool:
        sales = await self._read_raw(account)
        signature = record.tx_signature
        if any((s.get("data") or {}).get("txSignature") == signature for s in sales):
            self._logger.info("sales_record_duplicate", tx_signature=signature)
            return False
        sales.append(record.to_dict())
        await self._store.write(sales_file_key(account), json.dumps({"sales": sales}))
        self._logger.info(
            "sales_record_added",
            tx_signature=signature,
            sale_type=record.type,
            sales_count=len(sales),
        )
        return True
