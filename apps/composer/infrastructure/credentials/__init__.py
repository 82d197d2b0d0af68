"""Credential storage."""

from composer.infrastructure.credentials.memory import MemoryCredentialStore, login, logout

__all__ = ["MemoryCredentialStore", "login", "logout"]
