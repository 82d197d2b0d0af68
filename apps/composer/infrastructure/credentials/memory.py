"""In-process credential store plus sign-in/sign-out helpers."""

from __future__ import annotations

from composer.application.ports.credentials import CredentialStore
from composer.domain.auth import (
    AUTH_TOKEN_KEY,
    CREDENTIAL_KEYS,
    IS_AUTHENTICATED_KEY,
    USER_EMAIL_KEY,
    USER_ID_KEY,
    USERNAME_KEY,
    AuthContext,
)


class MemoryCredentialStore(CredentialStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values


def login(
    store: CredentialStore,
    token: str,
    user_id: str | None = None,
    username: str | None = None,
    email: str | None = None,
) -> AuthContext:
    store.set(AUTH_TOKEN_KEY, token)
    store.set(USER_ID_KEY, user_id or "")
    store.set(USERNAME_KEY, username or "")
    store.set(USER_EMAIL_KEY, email or "")
    store.set(IS_AUTHENTICATED_KEY, "true")
    return AuthContext.from_store(store)


def logout(store: CredentialStore) -> AuthContext:
    for key in CREDENTIAL_KEYS:
        store.remove(key)
    return AuthContext.anonymous()
