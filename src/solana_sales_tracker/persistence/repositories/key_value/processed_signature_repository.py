# -*- coding: utf-8 -*-
"""Processed-signature ledger stored as a JSON document in a key/value store."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import structlog

from solana_sales_tracker.models.processed_ledger import ProcessedSignatureLedger
from solana_sales_tracker.persistence.repositories.interfaces.processed_signature_repository import (
    IProcessedSignatureRepository,
)
from solana_sales_tracker.persistence.storage.base import IKeyValueStore
from solana_sales_tracker.utils.validation import mask_address


def audit_file_key(account: str) -> str:
    """Storage key of the ledger for account."""
    return f"sales/auditfile-{account.strip()}.json"


class KeyValueProcessedSignatureRepository(IProcessedSignatureRepository):
    """Document shape: {"processedSignatures": [oldest, ..., newest]}."""

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._store = store
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def load(self, account: str) -> ProcessedSignatureLedger:
        key = audit_file_key(account)
        raw = await self._store.read(key)
        if raw is None:
            ledger = ProcessedSignatureLedger()
            self._logger.info(
                "processed_ledger_created",
                account_masked=mask_address(account),
                storage_key=key,
            )
            await self.save(account, ledger)
            return ledger
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Malformed ledger document at {key!r}")
        return ProcessedSignatureLedger.from_dict(data)

    async def save(self, account: str, ledger: ProcessedSignatureLedger) -> None:
        await self._store.write(audit_file_key(account), json.dumps(ledger.to_dict()))
