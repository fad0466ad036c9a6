# -*- coding: utf-8 -*-
"""Unit tests for CosKeyValueStore (stubbed ibm-cos-sdk client)."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest
from ibm_botocore.exceptions import ClientError

from solana_sales_tracker.exceptions import StorageError
from solana_sales_tracker.persistence.repositories.key_value import (
    KeyValueProcessedSignatureRepository,
)
from solana_sales_tracker.persistence.storage import CosKeyValueStore


def _client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def _stub_client(objects: dict[str, bytes] | None = None, buckets: list[str] | None = None) -> MagicMock:
    """In-memory stand-in for the S3 client calls the store makes."""
    objects = {} if objects is None else objects
    client = MagicMock()

    def get_object(*, Bucket: str, Key: str) -> dict[str, io.BytesIO]:
        if Key not in objects:
            raise _client_error("NoSuchKey")
        return {"Body": io.BytesIO(objects[Key])}

    def put_object(*, Bucket: str, Key: str, Body: bytes) -> dict[str, str]:
        objects[Key] = Body
        return {}

    client.get_object.side_effect = get_object
    client.put_object.side_effect = put_object
    client.list_buckets.return_value = {"Buckets": [{"Name": b} for b in buckets or []]}
    return client


async def test_missing_key_reads_as_none() -> None:
    store = CosKeyValueStore(_stub_client(), "sales-bucket")

    assert await store.read("sales/auditfile-acct.json") is None


async def test_write_then_read_utf8() -> None:
    objects: dict[str, bytes] = {}
    client = _stub_client(objects)
    store = CosKeyValueStore(client, "sales-bucket")

    await store.write("sales/records-acct.json", '{"name": "Tracked #42 ✨"}')

    assert objects["sales/records-acct.json"] == '{"name": "Tracked #42 ✨"}'.encode("utf-8")
    assert await store.read("sales/records-acct.json") == '{"name": "Tracked #42 ✨"}'
    assert client.put_object.call_args.kwargs["Bucket"] == "sales-bucket"


async def test_other_client_errors_raise_storage_error() -> None:
    client = _stub_client()
    client.get_object.side_effect = _client_error("AccessDenied")
    store = CosKeyValueStore(client, "sales-bucket")

    with pytest.raises(StorageError) as exc_info:
        await store.read("sales/auditfile-acct.json")

    assert exc_info.value.key == "sales/auditfile-acct.json"


async def test_write_failure_raises_storage_error() -> None:
    client = _stub_client()
    client.put_object.side_effect = _client_error("ServiceUnavailable", "PutObject")
    store = CosKeyValueStore(client, "sales-bucket")

    with pytest.raises(StorageError):
        await store.write("k", "v")


async def test_prepare_keeps_existing_bucket() -> None:
    client = _stub_client(buckets=["other", "sales-bucket"])
    store = CosKeyValueStore(client, "sales-bucket", storage_class="us-standard")

    await store.prepare()

    client.create_bucket.assert_not_called()


async def test_prepare_creates_missing_bucket_with_storage_class() -> None:
    client = _stub_client(buckets=["other"])
    store = CosKeyValueStore(client, "sales-bucket", storage_class="us-standard")

    await store.prepare()

    client.create_bucket.assert_called_once_with(
        Bucket="sales-bucket",
        CreateBucketConfiguration={"LocationConstraint": "us-standard"},
    )


async def test_prepare_failure_raises_storage_error() -> None:
    client = _stub_client()
    client.list_buckets.side_effect = _client_error("AccessDenied", "ListBuckets")
    store = CosKeyValueStore(client, "sales-bucket")

    with pytest.raises(StorageError):
        await store.prepare()


async def test_ledger_repository_over_cos_store() -> None:
    objects: dict[str, bytes] = {}
    repo = KeyValueProcessedSignatureRepository(CosKeyValueStore(_stub_client(objects), "sales-bucket"))

    ledger = await repo.load("acct")
    await repo.save("acct", ledger.mark_processed("S1"))

    assert objects["sales/auditfile-acct.json"] == b'{"processedSignatures": ["S1"]}'
    assert (await repo.load("acct")).last_processed == "S1"
