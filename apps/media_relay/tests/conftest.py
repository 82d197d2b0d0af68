"""Test fixtures for the media relay."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from media_relay.core.config import Settings
from media_relay.main import create_app
from media_relay.storage import MemoryObjectStorage


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        storage_backend="memory",
        allowed_origins="https://powderfeed.test",
        max_file_size=1024,
    )


@pytest.fixture
def storage() -> MemoryObjectStorage:
    return MemoryObjectStorage()


@pytest.fixture
def client(test_settings: Settings, storage: MemoryObjectStorage) -> TestClient:
    return TestClient(create_app(settings=test_settings, storage=storage))
