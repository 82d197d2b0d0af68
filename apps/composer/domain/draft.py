"""Draft post owned by one open form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from composer.domain.categories import CategorySelection
from composer.domain.media import MediaFile

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
CONTENT_MIN_LENGTH = 10


@dataclass
class DraftPost:
    title: str = ""
    content: str = ""
    categories: CategorySelection = field(default_factory=CategorySelection)
    location: str = ""
    media_file: MediaFile | None = None
    media_key: str | None = None

    @property
    def is_blank(self) -> bool:
        return not (self.title or self.content or self.media_file)

    def snapshot(self) -> dict[str, Any]:
        """Text fields as sent to the writing assistant."""
        return {
            "title": self.title,
            "description": self.content,
            "categories": self.categories.as_list(),
            "location": self.location,
        }

    def validate(self) -> dict[str, str]:
        """Field errors keyed by form field; empty when the draft can be published."""
        errors: dict[str, str] = {}

        title = self.title.strip()
        if not title:
            errors["title"] = "Title is required"
        elif len(title) < TITLE_MIN_LENGTH:
            errors["title"] = f"Title must be at least {TITLE_MIN_LENGTH} characters"
        elif len(title) > TITLE_MAX_LENGTH:
            errors["title"] = f"Title must be less than {TITLE_MAX_LENGTH} characters"

        content = self.content.strip()
        if not content:
            errors["content"] = "Description is required"
        elif len(content) < CONTENT_MIN_LENGTH:
            errors["content"] = f"Description must be at least {CONTENT_MIN_LENGTH} characters"

        if self.media_file is None and not self.media_key:
            errors["image"] = "Please select an image"

        return errors

    def to_payload(self) -> dict[str, Any]:
        """Post-create body. `image` carries the stored key, never bytes or a URL."""
        return {
            "title": self.title.strip(),
            "content": self.content.strip(),
            "categories": self.categories.as_list(),
            "location": self.location.strip(),
            "image": self.media_key,
        }
