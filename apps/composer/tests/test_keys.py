"""KeyGenerator tests."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from composer.application.keys import KEY_PATTERN, KeyGenerator, file_extension, object_key, sanitize_prefix


class TestKeyGenerator:
    """KeyGenerator.generate"""

    def test_shape(self, key_generator: KeyGenerator) -> None:
        key = key_generator.generate("user42", "Powder Day.JPG")
        assert key == "user42_20250115_093005_abcd1234.jpg"

    def test_real_generator_matches_pattern(self) -> None:
        key = KeyGenerator().generate("post", "clip.MOV")
        match = KEY_PATTERN.match(key)
        assert match
        assert match["prefix"] == "post"
        assert match["ext"] == "mov"
        assert re.fullmatch(r"[a-z0-9]{8}", match["rand"])

    def test_same_second_keys_differ(self) -> None:
        generator = KeyGenerator(clock=lambda: datetime(2025, 1, 1, tzinfo=timezone.utc))
        keys = {generator.generate("post", "a.jpg") for _ in range(200)}
        assert len(keys) == 200

    def test_extension_from_content_type(self, key_generator: KeyGenerator) -> None:
        key = key_generator.generate("post", "blob", "image/png")
        assert key.endswith(".png")

    def test_extension_fallback(self, key_generator: KeyGenerator) -> None:
        assert key_generator.generate("post", "blob").endswith(".bin")


class TestHelpers:
    """prefix/extension/object key"""

    def test_sanitize_prefix(self) -> None:
        assert sanitize_prefix("user/../42") == "user-42"
        assert sanitize_prefix("") == "uploads"
        assert sanitize_prefix(None) == "uploads"

    def test_file_extension(self) -> None:
        assert file_extension("a.JPEG") == "jpeg"
        assert file_extension("archive.tar.gz") == "gz"
        assert file_extension("noext", "video/mp4") == "mp4"

    def test_object_key_applies_namespace_once(self) -> None:
        assert object_key("a.jpg") == "uploads/a.jpg"
        assert object_key("uploads/a.jpg") == "uploads/a.jpg"
