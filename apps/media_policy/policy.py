"""Upload Policy.

Size, type and key-shape rules shared by the browser-side validator and the relay.
Both sides evaluate the same policy independently; the relay is the authoritative gate.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_KEY_NAMESPACE = "uploads/"

# Relay allow-list (exact match)
ALLOWED_MIME_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "video/mp4",
    "video/quicktime",
    "video/x-msvideo",
    "video/webm",
)

# File picker allow-list (wildcards)
MEDIA_WILDCARDS: tuple[str, ...] = ("image/*", "video/*")

_GENERIC_CONTENT_TYPES = frozenset({"", "application/octet-stream"})


class RejectionReason(str, Enum):
    NO_FILE = "NoFile"
    MISSING_KEY = "MissingKey"
    INVALID_KEY = "InvalidKey"
    UNSUPPORTED_TYPE = "UnsupportedType"
    FILE_TOO_LARGE = "FileTooLarge"


@dataclass(frozen=True)
class UploadPolicy:
    """Upload limits enforced on both sides of the relay."""

    max_bytes: int = DEFAULT_MAX_BYTES
    allowed_mime_types: tuple[str, ...] = ALLOWED_MIME_TYPES
    key_namespace: str = DEFAULT_KEY_NAMESPACE

    def __post_init__(self) -> None:
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if not self.key_namespace.endswith("/"):
            raise ValueError("key_namespace must end with '/'")

    @property
    def max_megabytes(self) -> str:
        """Human readable ceiling, e.g. ``10`` or ``2.5``."""
        return f"{self.max_bytes / (1024 * 1024):g}"


def normalize_content_type(value: str | None) -> str:
    """Lower-case media type without parameters (``image/JPEG; q=1`` -> ``image/jpeg``)."""
    if not value:
        return ""
    return value.split(";", 1)[0].strip().lower()


def effective_content_type(content_type: str | None, filename: str | None = None) -> str:
    """Declared type, or the type guessed from the filename when the declared one is missing or generic."""
    declared = normalize_content_type(content_type)
    if declared not in _GENERIC_CONTENT_TYPES:
        return declared
    if not filename:
        return ""
    return normalize_content_type(mimetypes.guess_type(filename)[0])


def content_type_allowed(
    content_type: str | None,
    allowed: tuple[str, ...] | list[str],
    filename: str | None = None,
) -> bool:
    """Match a declared media type against an allow-list.

    - ``image/*`` style entries match by top-level type.
    - ``.ext`` entries match the filename extension.
    - other entries match the declared type exactly; when the declared type is
      missing or generic the type guessed from the filename is used instead.
    """
    suffix = PurePosixPath(filename).suffix.lower() if filename else ""
    effective = effective_content_type(content_type, filename)

    for entry in allowed:
        entry = entry.strip().lower()
        if not entry:
            continue
        if entry.endswith("/*"):
            category = entry[: -len("*")]
            if effective.startswith(category):
                return True
        elif entry.startswith("."):
            if suffix and suffix == entry:
                return True
        elif effective and effective == entry:
            return True
    return False


def check_key(key: str | None, policy: UploadPolicy) -> RejectionReason | None:
    """Key shape check: present, no traversal, inside the namespace."""
    if not key:
        return RejectionReason.MISSING_KEY
    if ".." in key or "\\" in key:
        return RejectionReason.INVALID_KEY
    if not key.startswith(policy.key_namespace) or key == policy.key_namespace:
        return RejectionReason.INVALID_KEY
    return None


def exceeds_limit(size: int | None, policy: UploadPolicy) -> bool:
    return size is not None and size > policy.max_bytes


def evaluate_upload(
    key: str | None,
    content_type: str | None,
    content_length: int | None,
    policy: UploadPolicy,
) -> RejectionReason | None:
    """Relay-side gate.

    Checks run in a fixed order and stop at the first failure:
    missing key, key shape, content type, declared size.
    """
    reason = check_key(key, policy)
    if reason is not None:
        return reason
    if not content_type_allowed(content_type, policy.allowed_mime_types):
        return RejectionReason.UNSUPPORTED_TYPE
    if exceeds_limit(content_length, policy):
        return RejectionReason.FILE_TOO_LARGE
    return None
