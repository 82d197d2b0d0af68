"""Category name rules.

Names are compared case-insensitively and stored in Title Case with single
spaces ("  ski  TRIP " -> "Ski Trip").
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def normalize_category_name(name: str) -> str:
    words = name.split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def category_key(name: str) -> str:
    return normalize_category_name(name).casefold()


class CategorySelection:
    """Ordered, case-insensitive set of selected categories."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._items: dict[str, str] = {}
        for name in names:
            self.add(name)

    def add(self, name: str) -> bool:
        """Insert the normalized name; False when blank or already selected."""
        normalized = normalize_category_name(name)
        if not normalized:
            return False
        key = normalized.casefold()
        if key in self._items:
            return False
        self._items[key] = normalized
        return True

    def remove(self, name: str) -> bool:
        return self._items.pop(category_key(name), None) is not None

    def toggle(self, name: str) -> bool:
        """Flip membership; returns True when the name is now selected."""
        if name in self:
            self.remove(name)
            return False
        return self.add(name)

    def clear(self) -> None:
        self._items.clear()

    def as_list(self) -> list[str]:
        return list(self._items.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and category_key(name) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CategorySelection({self.as_list()!r})"
