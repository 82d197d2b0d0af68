"""Configuration, wiring and credential helper tests."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from composer.application.compose import PostComposer
from composer.domain.auth import AuthContext
from composer.infrastructure.credentials import MemoryCredentialStore, login, logout
from composer.infrastructure.notifications import LoggingNotifier, MemoryNotifier
from composer.setup.config import ComposerSettings
from composer.setup.dependencies import build_composer, build_upload_client, build_url_resolver


class TestComposerSettings:
    """ComposerSettings"""

    def test_defaults(self) -> None:
        settings = ComposerSettings()
        assert settings.upload_timeout_seconds == 60.0
        assert settings.compensate_orphaned_uploads is True
        assert settings.upload_policy().allowed_mime_types == ("image/*", "video/*")

    def test_env_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("R2_PUBLIC_URL", "https://media.powderfeed.test")
        monkeypatch.setenv("COMPOSER_MAX_FILE_SIZE", "2048")
        settings = ComposerSettings()
        assert settings.public_base_url == "https://media.powderfeed.test"
        assert settings.max_file_size == 2048

    def test_namespace_must_end_with_slash(self) -> None:
        with pytest.raises(ValidationError):
            ComposerSettings(key_namespace="uploads")


class TestWiring:
    """setup.dependencies"""

    def test_build_composer_without_optional_keys(self) -> None:
        settings = ComposerSettings(openai_api_key=None, kakao_rest_api_key=None)
        composer = build_composer(AuthContext(token="t", user_id="u1"), settings, MemoryNotifier())
        assert isinstance(composer, PostComposer)
        assert composer.is_open

    def test_upload_client_uses_settings_policy(self) -> None:
        settings = ComposerSettings(max_file_size=1234)
        assert build_upload_client(settings).policy.max_bytes == 1234

    def test_url_resolver(self) -> None:
        settings = ComposerSettings(public_base_url="https://media.powderfeed.test/")
        resolver = build_url_resolver(settings)
        assert resolver.resolve("a.jpg") == "https://media.powderfeed.test/uploads/a.jpg"


class TestCredentials:
    """login/logout"""

    def test_login_then_logout(self) -> None:
        store = MemoryCredentialStore()

        auth = login(store, "tok", user_id="u1", username="shred", email="s@example.com")

        assert auth.is_authenticated
        assert auth.upload_prefix == "u1"
        assert store.get("isAuthenticated") == "true"

        assert not logout(store).is_authenticated
        assert not AuthContext.from_store(store).is_authenticated
        assert "userId" not in store

    def test_login_without_user_id_uses_default_prefix(self) -> None:
        auth = login(MemoryCredentialStore(), "tok")
        assert auth.upload_prefix == "post"


class TestMemoryNotifier:
    """MemoryNotifier"""

    def test_drain(self) -> None:
        notifier = MemoryNotifier()
        notifier.info("a")
        notifier.error("b")
        assert notifier.drain() == [("info", "a"), ("error", "b")]
        assert notifier.messages == []


class TestLoggingNotifier:
    """LoggingNotifier"""

    def test_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = LoggingNotifier()
        with caplog.at_level(logging.INFO, logger="composer.infrastructure.notifications.logging_notifier"):
            notifier.success("Post created successfully!")
            notifier.error("Upload failed. Please try again.")

        assert [(r.levelno, r.toast) for r in caplog.records] == [
            (logging.INFO, "success"),
            (logging.WARNING, "error"),
        ]
