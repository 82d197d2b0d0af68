"""Backend REST API client (posts and categories).

- POST /api/posts
- GET  /api/categories
- POST /api/categories
Auth: Authorization: Bearer <token> when signed in.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from composer.application.common.exceptions import BackendApiError
from composer.application.ports.backend import CategoriesApiPort, PostsApiPort
from composer.domain.auth import AuthContext

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_ERROR_MESSAGE = "Request failed"


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(payload, dict):
        for field in ("message", "error"):
            if isinstance(payload.get(field), str) and payload[field]:
                return payload[field]
    return DEFAULT_ERROR_MESSAGE


def _category_names(payload: Any) -> list[str]:
    """Accepts ["Ski"], [{"name": "Ski"}] or {"categories"|"data": [...]}."""
    if isinstance(payload, dict):
        payload = payload.get("categories", payload.get("data", []))
    if not isinstance(payload, list):
        return []
    names = []
    for item in payload:
        if isinstance(item, dict):
            item = item.get("name")
        if isinstance(item, str) and item.strip():
            names.append(item)
    return names


class BackendApiClient(PostsApiPort, CategoriesApiPort):
    def __init__(
        self,
        base_url: str,
        auth: AuthContext | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth or AuthContext.anonymous()
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    headers = {"Content-Type": "application/json"}
                    if self._auth.token:
                        headers["Authorization"] = f"Bearer {self._auth.token}"
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers=headers,
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        client = await self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error("Backend API transport error", extra={"path": path, "error": str(e)})
            raise BackendApiError("Could not reach the server. Please try again.") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "Backend API error",
                extra={"path": path, "status_code": response.status_code, "error": message},
            )
            raise BackendApiError(message, status=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendApiError("Invalid response from server", status=response.status_code) from e

    async def create_post(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("POST", "/api/posts", json=payload)
        if isinstance(data, dict):
            post = data.get("post")
            return post if isinstance(post, dict) else data
        return {}

    async def list_categories(self) -> list[str]:
        return _category_names(await self._request("GET", "/api/categories"))

    async def create_category(self, name: str) -> str:
        data = await self._request("POST", "/api/categories", json={"name": name})
        if isinstance(data, dict):
            stored = data.get("name")
            if stored is None and isinstance(data.get("category"), dict):
                stored = data["category"].get("name")
            if isinstance(stored, str) and stored.strip():
                return stored
        return name

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
