"""Test fixtures for the composer."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from composer.application.categories import CategoryStore
from composer.application.keys import KeyGenerator
from composer.application.ports.relay import RelayResponse
from composer.application.upload import UploadClient
from composer.domain.media import MediaFile
from composer.infrastructure.notifications import MemoryNotifier

FIXED_NOW = datetime(2025, 1, 15, 9, 30, 5, tzinfo=timezone.utc)

UPLOAD_OK = RelayResponse(
    200,
    '{"success": true, "message": "File uploaded successfully", "key": "uploads/x.jpg"}',
    "OK",
)
DELETE_OK = RelayResponse(200, '{"success": true}', "OK")


@pytest.fixture
def jpeg() -> MediaFile:
    """2MB JPEG."""
    return MediaFile("Powder Day.JPG", "image/jpeg", b"\xff\xd8" + b"0" * (2 * 1024 * 1024 - 2))


@pytest.fixture
def key_generator() -> KeyGenerator:
    return KeyGenerator(clock=lambda: FIXED_NOW, random_suffix=lambda: "abcd1234")


@pytest.fixture
def mock_relay() -> MagicMock:
    relay = MagicMock()
    relay.upload = AsyncMock(return_value=UPLOAD_OK)
    relay.delete = AsyncMock(return_value=DELETE_OK)
    relay.close = AsyncMock()
    return relay


@pytest.fixture
def upload_client(mock_relay: MagicMock, key_generator: KeyGenerator) -> UploadClient:
    return UploadClient(mock_relay, key_generator=key_generator)


@pytest.fixture
def mock_categories_api() -> MagicMock:
    api = MagicMock()
    api.list_categories = AsyncMock(return_value=["Skiing", "Snowboarding"])
    api.create_category = AsyncMock(side_effect=lambda name: name)
    return api


@pytest.fixture
def category_store(mock_categories_api: MagicMock) -> CategoryStore:
    return CategoryStore(mock_categories_api)


@pytest.fixture
def notifier() -> MemoryNotifier:
    return MemoryNotifier()
