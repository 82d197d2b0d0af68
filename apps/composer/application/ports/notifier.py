"""Transient user notifications (toasts)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotifierPort(ABC):
    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...
