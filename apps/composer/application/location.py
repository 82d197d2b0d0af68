"""Location autocomplete with a quiet-period debounce."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

from composer.application.common.exceptions import BackendApiError
from composer.application.ports.place_search import PlaceSearchPort, PlaceSuggestion

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3
MIN_QUERY_LENGTH = 2

SuggestionsCallback = Callable[[list[PlaceSuggestion]], None]


class LocationSuggester:
    """Schedules one lookup per quiet period of typing.

    Each keystroke cancels the pending lookup. Results for a query that has
    since been superseded, or that arrive after close(), are dropped.
    """

    def __init__(
        self,
        search: PlaceSearchPort,
        on_suggestions: SuggestionsCallback,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_length: int = MIN_QUERY_LENGTH,
    ) -> None:
        self._search = search
        self._on_suggestions = on_suggestions
        self._debounce = debounce_seconds
        self._min_length = min_length
        self._task: asyncio.Task | None = None
        self._generation = 0
        self._skip_text: str | None = None
        self._closed = False

    @property
    def pending(self) -> asyncio.Task | None:
        return self._task if self._task and not self._task.done() else None

    def on_input(self, text: str) -> None:
        if self._closed:
            return
        self._cancel_pending()
        self._generation += 1

        skip_text, self._skip_text = self._skip_text, None
        if skip_text is not None and text == skip_text:
            # text was just written by select()
            return

        query = text.strip()
        if len(query) < self._min_length:
            self._on_suggestions([])
            return

        self._task = asyncio.get_running_loop().create_task(self._lookup(query, self._generation))

    def select(self, suggestion: PlaceSuggestion) -> str:
        """Finalize a choice; an on_input call carrying exactly this label is not looked up."""
        self._cancel_pending()
        self._generation += 1
        self._skip_text = suggestion.label
        self._on_suggestions([])
        return suggestion.label

    async def close(self) -> None:
        self._closed = True
        self._generation += 1
        task = self._task
        self._cancel_pending()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _lookup(self, query: str, generation: int) -> None:
        await asyncio.sleep(self._debounce)
        if self._is_stale(generation):
            return
        try:
            results = await self._search.suggest(query)
        except BackendApiError as e:
            logger.warning("Place search failed", extra={"query": query, "error": e.message})
            results = []
        if self._is_stale(generation):
            return
        self._on_suggestions(results)

    def _is_stale(self, generation: int) -> bool:
        return self._closed or generation != self._generation

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
