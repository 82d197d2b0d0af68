"""Storage key generation.

`<prefix>_<YYYYMMDD_HHmmss>_<8 random [a-z0-9]>.<ext>`. The timestamp keeps keys
roughly sortable; the random suffix is the collision guard. Keys are never
checked against the bucket, a same-key put overwrites.
"""

from __future__ import annotations

import mimetypes
import re
import secrets
import string
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import PurePosixPath

from media_policy import DEFAULT_KEY_NAMESPACE

RANDOM_SUFFIX_LENGTH = 8
RANDOM_ALPHABET = string.ascii_lowercase + string.digits
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
FALLBACK_EXTENSION = "bin"
DEFAULT_PREFIX = "uploads"

_UNSAFE_PREFIX_CHARS = re.compile(r"[^A-Za-z0-9_-]+")

KEY_PATTERN = re.compile(r"^(?P<prefix>[A-Za-z0-9_-]+)_(?P<ts>\d{8}_\d{6})_(?P<rand>[A-Za-z0-9]{8})\.(?P<ext>[a-z0-9]+)$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _random_suffix() -> str:
    return "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(RANDOM_SUFFIX_LENGTH))


def sanitize_prefix(prefix: str | None) -> str:
    cleaned = _UNSAFE_PREFIX_CHARS.sub("-", (prefix or "").strip()).strip("-")
    return cleaned or DEFAULT_PREFIX


def file_extension(filename: str, content_type: str | None = None) -> str:
    suffix = PurePosixPath(filename).suffix.lower().lstrip(".")
    if suffix and suffix.isalnum():
        return suffix
    if content_type:
        guessed = mimetypes.guess_extension(content_type.split(";", 1)[0].strip().lower())
        if guessed:
            return guessed.lstrip(".")
    return FALLBACK_EXTENSION


def object_key(filename: str, namespace: str = DEFAULT_KEY_NAMESPACE) -> str:
    """Bucket key for a stored filename (namespace applied once)."""
    if filename.startswith(namespace):
        return filename
    return f"{namespace}{filename}"


class KeyGenerator:
    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        random_suffix: Callable[[], str] = _random_suffix,
    ) -> None:
        self._clock = clock
        self._random_suffix = random_suffix

    def generate(self, prefix: str, filename: str, content_type: str | None = None) -> str:
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        extension = file_extension(filename, content_type)
        return f"{sanitize_prefix(prefix)}_{timestamp}_{self._random_suffix()}.{extension}"
