"""AI Content Assist

Asks a generative model to fill in the draft from a short brief. The reply is
untrusted text: the first balanced JSON object is cut out of it, every field is
checked on its own, and only present non-empty fields reach the draft.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from composer.application.categories import CategoryStore
from composer.application.common.exceptions import (
    InvalidCategoryNameError,
    InvalidJsonError,
    NoJsonObjectError,
)
from composer.application.ports.text_generation import TextGenerationPort
from composer.domain.draft import TITLE_MAX_LENGTH, DraftPost

logger = logging.getLogger(__name__)

MAX_SUGGESTED_CATEGORIES = 5

SYSTEM_PROMPT = """You help winter-sports enthusiasts write posts for a community feed.
Write in a friendly, upbeat tone. Keep the title under 60 characters and the
description between two and four sentences.

Reply with a single JSON object and nothing else, using this schema:
{"title": string, "description": string, "categories": [string], "location": string}

Omit any field you cannot fill in. Use at most 3 short categories such as
"Skiing", "Snowboarding", "Backcountry" or "Apres Ski"."""


@dataclass
class SuggestionFields:
    title: str | None = None
    description: str | None = None
    categories: list[str] = field(default_factory=list)
    location: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.description or self.categories or self.location)


def extract_json_object(text: str) -> str:
    """Return the first balanced `{...}` span in `text`.

    Braces inside JSON strings (including escaped quotes) do not count.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for index in range(start, len(text)):
            char = text[index]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : index + 1]
        # unbalanced from this brace; try the next opening brace
        start = text.find("{", start + 1)
    raise NoJsonObjectError()


def _clean_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


def _clean_categories(payload: dict[str, Any]) -> list[str]:
    raw = payload.get("categories")
    if raw is None:
        raw = payload.get("tags", payload.get("tag"))
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, list):
        return []
    names = [item.strip() for item in raw if isinstance(item, str) and item.strip()]
    return names[:MAX_SUGGESTED_CATEGORIES]


def parse_suggestion(span: str) -> SuggestionFields:
    try:
        payload = json.loads(span)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(e.msg) from e
    if not isinstance(payload, dict):
        raise InvalidJsonError("expected an object")

    title = _clean_text(payload.get("title"))
    if title and len(title) > TITLE_MAX_LENGTH:
        title = title[:TITLE_MAX_LENGTH].rstrip()

    return SuggestionFields(
        title=title,
        description=_clean_text(payload.get("description", payload.get("content"))),
        categories=_clean_categories(payload),
        location=_clean_text(payload.get("location")),
    )


async def merge_suggestion(
    draft: DraftPost,
    suggestion: SuggestionFields,
    categories: CategoryStore,
    is_alive: Callable[[], bool] = lambda: True,
) -> list[str]:
    """Apply a suggestion to the draft in place; returns the categories added.

    Stops touching the draft once is_alive() turns false.
    """
    if suggestion.title:
        draft.title = suggestion.title
    if suggestion.description:
        draft.content = suggestion.description
    if suggestion.location:
        draft.location = suggestion.location

    added: list[str] = []
    for name in suggestion.categories:
        try:
            canonical = await categories.ensure(name)
        except InvalidCategoryNameError:
            continue
        if not is_alive():
            break
        if draft.categories.add(canonical):
            added.append(canonical)
    return added


class AIContentAssist:
    def __init__(self, generator: TextGenerationPort, system_prompt: str = SYSTEM_PROMPT) -> None:
        self._generator = generator
        self._system_prompt = system_prompt

    async def generate(self, brief: str, draft: DraftPost) -> SuggestionFields:
        reply = await self._generator.generate(
            prompt=brief.strip(),
            system_prompt=self._system_prompt,
            context={"draft": draft.snapshot()},
        )
        suggestion = parse_suggestion(extract_json_object(reply))
        logger.info(
            "AI suggestion parsed",
            extra={
                "has_title": bool(suggestion.title),
                "has_description": bool(suggestion.description),
                "category_count": len(suggestion.categories),
            },
        )
        return suggestion

    async def close(self) -> None:
        await self._generator.close()
