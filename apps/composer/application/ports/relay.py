"""Media Relay Port."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class RelayTransportError(Exception):
    """No HTTP response (connection error or timeout)."""

    def __init__(self, message: str = "Relay unreachable") -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class RelayResponse:
    status_code: int
    text: str = ""
    reason_phrase: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> dict[str, Any] | None:
        try:
            payload = json.loads(self.text)
        except (TypeError, ValueError):
            return None
        return payload if isinstance(payload, dict) else None

    @property
    def error_message(self) -> str:
        """Relay `error` field, else body text, else the status line."""
        payload = self.json()
        if payload and isinstance(payload.get("error"), str) and payload["error"]:
            return payload["error"]
        if self.text.strip():
            return self.text.strip()
        return f"{self.status_code} {self.reason_phrase}".strip()


class MediaRelayPort(ABC):
    @abstractmethod
    async def upload(self, key: str, data: bytes, content_type: str) -> RelayResponse:
        """POST the raw bytes to /upload?key=..."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> RelayResponse:
        """DELETE /delete?key=..."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
