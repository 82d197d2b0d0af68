"""Signed-in user as seen by the composer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

AUTH_TOKEN_KEY = "authToken"
USER_ID_KEY = "userId"
USERNAME_KEY = "username"
USER_EMAIL_KEY = "userEmail"
IS_AUTHENTICATED_KEY = "isAuthenticated"

CREDENTIAL_KEYS = (
    AUTH_TOKEN_KEY,
    USER_ID_KEY,
    USERNAME_KEY,
    USER_EMAIL_KEY,
    IS_AUTHENTICATED_KEY,
)

DEFAULT_UPLOAD_PREFIX = "post"


class KeyValueReader(Protocol):
    def get(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class AuthContext:
    """Credentials read once from the credential store and passed explicitly."""

    token: str | None = None
    user_id: str | None = None
    username: str | None = None
    email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def upload_prefix(self) -> str:
        return self.user_id or DEFAULT_UPLOAD_PREFIX

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def from_store(cls, store: KeyValueReader) -> "AuthContext":
        token = store.get(AUTH_TOKEN_KEY) or None
        if not token:
            return cls.anonymous()
        return cls(
            token=token,
            user_id=store.get(USER_ID_KEY) or None,
            username=store.get(USERNAME_KEY) or None,
            email=store.get(USER_EMAIL_KEY) or None,
        )
