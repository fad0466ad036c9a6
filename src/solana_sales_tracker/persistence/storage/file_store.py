# -*- coding: utf-8 -*-
"""Local filesystem key/value store (one UTF-8 file per key)."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog

from solana_sales_tracker.exceptions import StorageError
from solana_sales_tracker.persistence.storage.base import IKeyValueStore


class FileKeyValueStore(IKeyValueStore):
    """Keys are relative paths under root_dir; writes go through a temp file and rename."""

    def __init__(
        self,
        root_dir: str | Path,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._root = Path(root_dir)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _path(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if not path.is_relative_to(self._root.resolve()):
            raise ValueError(f"Key escapes storage root: {key!r}")
        return path

    async def read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {key!r}: {e}", key=key, cause=e) from e

    async def write(self, key: str, contents: str) -> None:
        path = self._path(key)
        tmp = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(contents, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Cannot write {key!r}: {e}", key=key, cause=e) from e
        self._logger.debug("file_store_written", storage_key=key, storage_bytes=len(contents))
