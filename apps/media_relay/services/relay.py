from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from media_policy import UploadPolicy, check_key, evaluate_upload, normalize_content_type
from media_relay.core.constants import UPLOADED_AT_METADATA_KEY
from media_relay.core.exceptions import (
    MissingKeyError,
    ObjectNotFoundError,
    PayloadTooLargeError,
    StorageOperationError,
    rejection_error,
)
from media_relay.metrics import RELAY_REQUESTS, RELAY_STORED_BYTES
from media_relay.storage import ObjectStorage, StoredObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    key: str
    content_type: str
    size: int
    uploaded_at: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_content_length(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        length = int(value)
    except ValueError:
        return None
    return length if length >= 0 else None


class RelayService:
    """Validates relay requests and performs bucket operations.

    Nothing is written unless every check passes and the full body has been
    received within the size ceiling.
    """

    def __init__(
        self,
        storage: ObjectStorage,
        policy: UploadPolicy,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._policy = policy
        self._clock = clock

    @property
    def policy(self) -> UploadPolicy:
        return self._policy

    def validate_upload(
        self,
        key: str | None,
        content_type: str | None,
        content_length: int | None,
    ) -> None:
        reason = evaluate_upload(key, content_type, content_length, self._policy)
        if reason is not None:
            RELAY_REQUESTS.labels(operation="upload", outcome="rejected").inc()
            logger.info(
                "Upload rejected",
                extra={"key": key, "content_type": content_type, "reason": reason.value},
            )
            raise rejection_error(reason, self._policy)

    def validate_key(self, key: str | None, operation: str) -> None:
        reason = check_key(key, self._policy)
        if reason is not None:
            RELAY_REQUESTS.labels(operation=operation, outcome="rejected").inc()
            raise rejection_error(reason, self._policy)

    async def _read_body(self, chunks: AsyncIterator[bytes]) -> bytes:
        buffer = bytearray()
        async for chunk in chunks:
            buffer.extend(chunk)
            if len(buffer) > self._policy.max_bytes:
                RELAY_REQUESTS.labels(operation="upload", outcome="rejected").inc()
                raise PayloadTooLargeError(self._policy.max_megabytes)
        return bytes(buffer)

    async def upload(
        self,
        key: str | None,
        content_type: str | None,
        content_length: int | None,
        chunks: AsyncIterator[bytes],
    ) -> UploadResult:
        self.validate_upload(key, content_type, content_length)
        if key is None:
            raise MissingKeyError()

        body = await self._read_body(chunks)
        media_type = normalize_content_type(content_type)
        uploaded_at = self._clock().isoformat()

        try:
            await self._storage.put(
                key,
                body,
                content_type=media_type,
                metadata={UPLOADED_AT_METADATA_KEY: uploaded_at},
            )
        except Exception as e:
            RELAY_REQUESTS.labels(operation="upload", outcome="error").inc()
            logger.exception(
                "Bucket write failed",
                extra={"key": key, "content_type": media_type, "error": str(e)},
            )
            raise StorageOperationError("upload") from e

        RELAY_REQUESTS.labels(operation="upload", outcome="success").inc()
        RELAY_STORED_BYTES.inc(len(body))
        logger.info(
            "File uploaded",
            extra={"key": key, "content_type": media_type, "size_bytes": len(body)},
        )
        return UploadResult(
            key=key,
            content_type=media_type,
            size=len(body),
            uploaded_at=uploaded_at,
        )

    async def delete(self, key: str | None) -> str:
        self.validate_key(key, "delete")
        if key is None:
            raise MissingKeyError()
        try:
            await self._storage.delete(key)
        except Exception as e:
            RELAY_REQUESTS.labels(operation="delete", outcome="error").inc()
            logger.exception("Bucket delete failed", extra={"key": key, "error": str(e)})
            raise StorageOperationError("delete") from e

        RELAY_REQUESTS.labels(operation="delete", outcome="success").inc()
        logger.info("File deleted", extra={"key": key})
        return key

    async def fetch(self, key: str | None) -> StoredObject:
        # Read path only requires a key; legacy objects may live outside the namespace.
        if not key:
            self.validate_key(key, "file")
        if key is None:
            raise MissingKeyError()
        try:
            stored = await self._storage.get(key)
        except Exception as e:
            RELAY_REQUESTS.labels(operation="file", outcome="error").inc()
            logger.exception("Bucket read failed", extra={"key": key, "error": str(e)})
            raise StorageOperationError("read") from e

        if stored is None:
            RELAY_REQUESTS.labels(operation="file", outcome="not_found").inc()
            raise ObjectNotFoundError()
        RELAY_REQUESTS.labels(operation="file", outcome="success").inc()
        return stored
