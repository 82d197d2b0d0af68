"""Object Storage Port.

The relay talks to the bucket only through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class StoredObject:
    """Object read back from the bucket."""

    key: str
    body: bytes
    content_type: str
    etag: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.body)


class ObjectStorage(ABC):
    """Bucket port."""

    @abstractmethod
    async def put(
        self,
        key: str,
        body: bytes,
        *,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Write (or overwrite) an object."""
        ...

    @abstractmethod
    async def get(self, key: str) -> StoredObject | None:
        """Read an object, None when absent."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete an object. Deleting a missing key is not an error."""
        ...
