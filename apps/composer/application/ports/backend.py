"""Backend REST API ports (posts and categories)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PostsApiPort(ABC):
    @abstractmethod
    async def create_post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a post from {title, content, categories, location, image}."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...


class CategoriesApiPort(ABC):
    @abstractmethod
    async def list_categories(self) -> list[str]:
        """All category names known to the backend."""
        ...

    @abstractmethod
    async def create_category(self, name: str) -> str:
        """Persist a category; returns the name as stored by the server."""
        ...
