"""In-process bucket for local development and tests."""

from __future__ import annotations

import asyncio
import hashlib

from media_relay.storage.base import ObjectStorage, StoredObject


class MemoryObjectStorage(ObjectStorage):
    def __init__(self) -> None:
        self._objects: dict[str, StoredObject] = {}
        self._lock = asyncio.Lock()

    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        etag = f'"{hashlib.md5(body).hexdigest()}"'
        async with self._lock:
            self._objects[key] = StoredObject(
                key=key,
                body=bytes(body),
                content_type=content_type,
                etag=etag,
                metadata=dict(metadata),
            )

    async def get(self, key: str) -> StoredObject | None:
        return self._objects.get(key)

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._objects.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._objects

    def __len__(self) -> int:
        return len(self._objects)
