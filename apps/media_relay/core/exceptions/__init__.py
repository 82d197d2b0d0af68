"""Core Exceptions."""

from media_relay.core.exceptions.storage import StorageOperationError
from media_relay.core.exceptions.upload import (
    InvalidKeyError,
    MissingKeyError,
    ObjectNotFoundError,
    PayloadTooLargeError,
    RelayError,
    UnsupportedMediaTypeError,
    rejection_error,
)

__all__ = [
    "InvalidKeyError",
    "MissingKeyError",
    "ObjectNotFoundError",
    "PayloadTooLargeError",
    "RelayError",
    "StorageOperationError",
    "UnsupportedMediaTypeError",
    "rejection_error",
]
