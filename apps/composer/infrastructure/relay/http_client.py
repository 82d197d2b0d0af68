"""Media relay HTTP client.

- Upload: POST {base}/upload?key=<key>, raw bytes, Content-Type = file type
- Delete: DELETE {base}/delete?key=<key>
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from composer.application.ports.relay import MediaRelayPort, RelayResponse, RelayTransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


def _to_relay_response(response: httpx.Response) -> RelayResponse:
    return RelayResponse(
        status_code=response.status_code,
        text=response.text,
        reason_phrase=response.reason_phrase,
    )


class RelayHttpClient(MediaRelayPort):
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        timeout=self._timeout,
                        transport=self._transport,
                    )
        return self._client

    async def upload(self, key: str, data: bytes, content_type: str) -> RelayResponse:
        client = await self._get_client()
        try:
            response = await client.post(
                "/upload",
                params={"key": key},
                content=data,
                headers={"Content-Type": content_type},
            )
        except httpx.TimeoutException as e:
            logger.error("Relay upload timeout", extra={"key": key})
            raise RelayTransportError("Upload timed out") from e
        except httpx.TransportError as e:
            logger.error("Relay upload transport error", extra={"key": key, "error": str(e)})
            raise RelayTransportError(str(e) or "Relay unreachable") from e
        return _to_relay_response(response)

    async def delete(self, key: str) -> RelayResponse:
        client = await self._get_client()
        try:
            response = await client.delete("/delete", params={"key": key})
        except httpx.TransportError as e:
            logger.error("Relay delete transport error", extra={"key": key, "error": str(e)})
            raise RelayTransportError(str(e) or "Relay unreachable") from e
        return _to_relay_response(response)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
