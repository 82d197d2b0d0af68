"""Notifier that writes toasts to the log."""

from __future__ import annotations

import logging

from composer.application.ports.notifier import NotifierPort

logger = logging.getLogger(__name__)


class LoggingNotifier(NotifierPort):
    def info(self, message: str) -> None:
        logger.info(message, extra={"toast": "info"})

    def success(self, message: str) -> None:
        logger.info(message, extra={"toast": "success"})

    def error(self, message: str) -> None:
        logger.warning(message, extra={"toast": "error"})
