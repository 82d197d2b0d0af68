"""Kakao Local keyword search for location autocomplete.

- GET /v2/local/search/keyword.json
- Authorization: KakaoAK {REST_API_KEY}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from composer.application.common.exceptions import BackendApiError
from composer.application.ports.place_search import PlaceSearchPort, PlaceSuggestion

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
MAX_PAGE_SIZE = 15


class KakaoPlaceSearchClient(PlaceSearchPort):
    BASE_URL = "https://dapi.kakao.com/v2/local/search"

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.BASE_URL,
                        headers={"Authorization": f"KakaoAK {self._api_key}"},
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def suggest(self, query: str, size: int = 5) -> list[PlaceSuggestion]:
        client = await self._get_client()
        params = {"query": query, "size": max(1, min(size, MAX_PAGE_SIZE))}

        try:
            response = await client.get("/keyword.json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Kakao API HTTP error",
                extra={"status_code": e.response.status_code, "query": query},
            )
            raise BackendApiError("Place search failed", status=e.response.status_code) from e
        except httpx.TimeoutException as e:
            logger.error("Kakao API timeout", extra={"query": query})
            raise BackendApiError("Place search timed out") from e
        except (httpx.TransportError, ValueError) as e:
            logger.error("Kakao keyword search failed", extra={"query": query, "error": str(e)})
            raise BackendApiError("Place search failed") from e

        return self._parse_documents(data)

    def _parse_documents(self, data: dict[str, Any]) -> list[PlaceSuggestion]:
        suggestions = []
        for doc in data.get("documents", []):
            x = doc.get("x")
            y = doc.get("y")
            if not x or not y:
                continue
            try:
                longitude, latitude = float(x), float(y)
            except ValueError:
                continue
            suggestions.append(
                PlaceSuggestion(
                    place_name=doc.get("place_name", ""),
                    address=doc.get("road_address_name") or doc.get("address_name", ""),
                    latitude=latitude,
                    longitude=longitude,
                )
            )
        return suggestions

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
