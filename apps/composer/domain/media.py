"""Media file selected in the post form."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class MediaFile:
    """Local file reference: name, declared media type and raw bytes."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lower-cased extension without the dot, '' when absent."""
        return PurePosixPath(self.filename).suffix.lower().lstrip(".")

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> "MediaFile":
        path = Path(path)
        guessed = content_type or mimetypes.guess_type(path.name)[0] or ""
        return cls(filename=path.name, content_type=guessed, data=path.read_bytes())
