"""Credential store port (browser key-value storage)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CredentialStore(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...
