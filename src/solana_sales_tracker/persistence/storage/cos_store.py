# -*- coding: utf-8 -*-
"""IBM Cloud Object Storage key/value store (one object per key in a single bucket)."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional

import ibm_boto3
import structlog
from ibm_botocore.client import Config
from ibm_botocore.exceptions import BotoCoreError, ClientError

from solana_sales_tracker.exceptions import StorageError
from solana_sales_tracker.persistence.storage.base import IKeyValueStore

if TYPE_CHECKING:
    from solana_sales_tracker.config import StorageSettings

_MISSING_KEY_CODES = frozenset({"NoSuchKey", "404"})


def build_cos_client(storage: "StorageSettings") -> Any:
    """S3 client authenticated with an IBM Cloud API key (IAM token signing)."""
    return ibm_boto3.client(
        "s3",
        ibm_api_key_id=storage.cos_api_key,
        ibm_service_instance_id=storage.cos_resource_instance_id,
        ibm_auth_endpoint=storage.cos_auth_endpoint,
        config=Config(signature_version="oauth"),
        endpoint_url=storage.cos_endpoint,
    )


class CosKeyValueStore(IKeyValueStore):
    """Documents are UTF-8 objects in `bucket`, keyed by the storage key.

    The client is synchronous (ibm-cos-sdk); calls run in a worker thread.
    prepare() creates the bucket when it does not exist yet.
    """

    def __init__(
        self,
        client: Any,
        bucket: str,
        *,
        storage_class: Optional[str] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._client = client
        self._bucket = bucket
        self._storage_class = storage_class
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @classmethod
    def from_settings(cls, storage: "StorageSettings") -> CosKeyValueStore:
        return cls(
            build_cos_client(storage),
            str(storage.cos_bucket),
            storage_class=storage.cos_storage_class,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    async def prepare(self) -> None:
        """Ensure the bucket exists, creating it if needed.

        Raises:
            StorageError: If the buckets cannot be listed or the bucket cannot be created.
        """
        try:
            listing = await asyncio.to_thread(self._client.list_buckets)
            names = {b.get("Name") for b in listing.get("Buckets") or []}
            if self._bucket in names:
                self._logger.info("cos_bucket_found", cos_bucket=self._bucket)
                return
            self._logger.info("cos_bucket_creating", cos_bucket=self._bucket)
            kwargs: dict[str, Any] = {"Bucket": self._bucket}
            if self._storage_class:
                kwargs["CreateBucketConfiguration"] = {"LocationConstraint": self._storage_class}
            await asyncio.to_thread(self._client.create_bucket, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Cannot prepare bucket {self._bucket!r}: {e}", cause=e) from e

    async def read(self, key: str) -> str | None:
        try:
            response = await asyncio.to_thread(
                self._client.get_object, Bucket=self._bucket, Key=key
            )
            body = await asyncio.to_thread(response["Body"].read)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_KEY_CODES:
                return None
            raise StorageError(f"Cannot read {key!r}: {e}", key=key, cause=e) from e
        except BotoCoreError as e:
            raise StorageError(f"Cannot read {key!r}: {e}", key=key, cause=e) from e
        return body.decode("utf-8")

    async def write(self, key: str, contents: str) -> None:
        data = contents.encode("utf-8")
        try:
            await asyncio.to_thread(
                self._client.put_object, Bucket=self._bucket, Key=key, Body=data
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Cannot write {key!r}: {e}", key=key, cause=e) from e
        self._logger.debug("cos_object_written", storage_key=key, storage_bytes=len(data))
