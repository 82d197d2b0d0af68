"""OpenAI text generation client - TextGenerationPort implementation.

Chat Completions only; parsing the reply is the caller's job.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from composer.application.common.exceptions import UpstreamRejectedError
from composer.application.ports.text_generation import TextGenerationPort
from composer.infrastructure.llm.config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    HTTP_LIMITS,
    HTTP_TIMEOUT,
    MAX_RETRIES,
)

logger = logging.getLogger(__name__)


def build_messages(
    prompt: str,
    system_prompt: str | None = None,
    context: dict[str, Any] | None = None,
) -> list[dict[str, str]]:
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})

    user_content = prompt
    if context:
        context_str = json.dumps(context, ensure_ascii=False, indent=2)
        user_content = f"## Context\n{context_str}\n\n## Request\n{prompt}"

    messages.append({"role": "user", "content": user_content})
    return messages


class OpenAITextGenerator(TextGenerationPort):
    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """
        Args:
            model: chat model name
            api_key: None reads OPENAI_API_KEY from the environment
            client: pre-built client (tests)
        """
        if client is None:
            http_client = httpx.AsyncClient(timeout=HTTP_TIMEOUT, limits=HTTP_LIMITS)
            client = AsyncOpenAI(api_key=api_key, http_client=http_client, max_retries=MAX_RETRIES)
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        logger.info("OpenAITextGenerator initialized", extra={"model": model})

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=build_messages(prompt, system_prompt, context),
                temperature=self._temperature,
                max_completion_tokens=self._max_tokens,
            )
        except APIStatusError as e:
            logger.warning(
                "OpenAI request rejected",
                extra={"status_code": e.status_code, "model": self._model},
            )
            raise UpstreamRejectedError(e.status_code, e.message) from e
        except APIConnectionError as e:
            logger.warning("OpenAI unreachable", extra={"model": self._model, "error": str(e)})
            raise UpstreamRejectedError(None, "connection failed") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        await self._client.close()
