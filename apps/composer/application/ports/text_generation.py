"""Generative text port.

Implementations raise UpstreamRejectedError when the API call fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TextGenerationPort(ABC):
    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> str:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
