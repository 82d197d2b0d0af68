"""Notifier that queues toasts for the form to render."""

from __future__ import annotations

from composer.application.ports.notifier import NotifierPort


class MemoryNotifier(NotifierPort):
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.messages]

    def drain(self) -> list[tuple[str, str]]:
        """Return queued toasts and clear the queue."""
        messages, self.messages = self.messages, []
        return messages
