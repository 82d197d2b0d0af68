"""S3-compatible bucket adapter (AWS S3, Cloudflare R2).

boto3 is synchronous; calls run in the default executor so the event loop is
never blocked by network I/O.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import ClientError

from media_relay.storage.base import ObjectStorage, StoredObject

if TYPE_CHECKING:
    from botocore.client import BaseClient

    from media_relay.core import Settings

logger = logging.getLogger(__name__)

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


def create_s3_client(settings: "Settings") -> "BaseClient":
    kwargs: dict[str, Any] = {"region_name": settings.aws_region}
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        kwargs["aws_access_key_id"] = settings.aws_access_key_id
        kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    return boto3.client("s3", **kwargs)


class S3ObjectStorage(ObjectStorage):
    def __init__(self, s3_client: "BaseClient", bucket: str) -> None:
        self._s3 = s3_client
        self._bucket = bucket

    async def _run(self, func, /, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, **kwargs))

    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        await self._run(
            self._s3.put_object,
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            Metadata=metadata,
        )

    async def get(self, key: str) -> StoredObject | None:
        try:
            response = await self._run(self._s3.get_object, Bucket=self._bucket, Key=key)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_OBJECT_CODES:
                return None
            raise

        stream = response["Body"]
        try:
            body = await self._run(stream.read)
        finally:
            stream.close()

        return StoredObject(
            key=key,
            body=body,
            content_type=response.get("ContentType") or "application/octet-stream",
            etag=response.get("ETag") or "",
            metadata=dict(response.get("Metadata") or {}),
        )

    async def delete(self, key: str) -> None:
        await self._run(self._s3.delete_object, Bucket=self._bucket, Key=key)
