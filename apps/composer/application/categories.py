"""Category Store

Server categories merged with names created locally that the server has not
acknowledged yet. Remote failures degrade to local-only behavior and never
propagate to the form.
"""

from __future__ import annotations

import logging

from composer.application.common.exceptions import BackendApiError, InvalidCategoryNameError
from composer.application.ports.backend import CategoriesApiPort
from composer.domain.categories import normalize_category_name

logger = logging.getLogger(__name__)


class CategoryStore:
    def __init__(self, api: CategoriesApiPort) -> None:
        self._api = api
        self._confirmed: dict[str, str] = {}
        self._pending: dict[str, str] = {}
        self.last_warning: str | None = None

    @property
    def pending(self) -> list[str]:
        return sorted(self._pending.values(), key=str.casefold)

    def known(self) -> list[str]:
        merged = {**self._pending, **self._confirmed}
        return sorted(merged.values(), key=str.casefold)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = normalize_category_name(name).casefold()
        return key in self._confirmed or key in self._pending

    async def load_all(self) -> list[str]:
        try:
            names = await self._api.list_categories()
        except BackendApiError as e:
            self._warn(f"Could not load categories: {e.message}")
            return self.pending

        self._confirmed = {}
        for name in names:
            normalized = normalize_category_name(name)
            if normalized:
                self._confirmed[normalized.casefold()] = normalized
        for key in list(self._pending):
            if key in self._confirmed:
                del self._pending[key]
        self.last_warning = None
        return self.known()

    async def ensure(self, name: str) -> str:
        """Return the canonical name, creating it remotely when unknown.

        A failed create keeps the name as pending; the caller still gets it.
        Pending names are returned as they are; sync_pending retries them.
        """
        normalized = normalize_category_name(name)
        if not normalized:
            raise InvalidCategoryNameError()

        key = normalized.casefold()
        if key in self._confirmed:
            return self._confirmed[key]
        if key in self._pending:
            return self._pending[key]

        try:
            stored = await self._api.create_category(normalized)
        except BackendApiError as e:
            self._pending[key] = normalized
            self._warn(f"Category '{normalized}' saved locally: {e.message}")
            return self._pending[key]

        canonical = normalize_category_name(stored) or normalized
        self._confirmed[key] = canonical
        self._pending.pop(key, None)
        return canonical

    async def sync_pending(self) -> list[str]:
        """Retry remote creation of pending names; returns those now confirmed."""
        synced: list[str] = []
        for key, name in list(self._pending.items()):
            try:
                stored = await self._api.create_category(name)
            except BackendApiError as e:
                self._warn(f"Category '{name}' still pending: {e.message}")
                continue
            self._confirmed[key] = normalize_category_name(stored) or name
            del self._pending[key]
            synced.append(self._confirmed[key])
        return synced

    def _warn(self, message: str) -> None:
        self.last_warning = message
        logger.warning(message)
