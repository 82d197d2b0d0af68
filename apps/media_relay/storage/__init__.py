"""Bucket adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from media_relay.storage.base import ObjectStorage, StoredObject
from media_relay.storage.memory import MemoryObjectStorage

if TYPE_CHECKING:
    from media_relay.core import Settings

logger = logging.getLogger(__name__)


def create_storage(settings: "Settings") -> ObjectStorage:
    """Build the configured bucket adapter."""
    if settings.storage_backend == "memory":
        logger.warning("Using in-memory object storage; objects are lost on restart")
        return MemoryObjectStorage()

    from media_relay.storage.s3 import S3ObjectStorage, create_s3_client

    logger.info(
        "S3 object storage configured",
        extra={"bucket": settings.s3_bucket, "endpoint_url": settings.s3_endpoint_url},
    )
    return S3ObjectStorage(create_s3_client(settings), settings.s3_bucket)


__all__ = ["MemoryObjectStorage", "ObjectStorage", "StoredObject", "create_storage"]
