"""Notification adapters."""

from composer.infrastructure.notifications.logging_notifier import LoggingNotifier
from composer.infrastructure.notifications.memory_notifier import MemoryNotifier

__all__ = ["LoggingNotifier", "MemoryNotifier"]
