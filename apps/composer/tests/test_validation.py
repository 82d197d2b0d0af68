"""File validation tests."""

from __future__ import annotations

import pytest

from media_policy import RejectionReason, UploadPolicy

from composer.application.validation import PICKER_POLICY, validate_file
from composer.domain.media import MediaFile

TEN_MB = 10 * 1024 * 1024


class TestValidateFile:
    """validate_file"""

    def test_jpeg_accepted(self, jpeg: MediaFile) -> None:
        result = validate_file(jpeg)
        assert result.ok
        assert result.reason is None

    @pytest.mark.parametrize("file", [None, MediaFile("", "image/png", b"x"), MediaFile("a.png", "image/png", b"")])
    def test_no_file(self, file) -> None:
        result = validate_file(file)
        assert not result.ok
        assert result.reason is RejectionReason.NO_FILE

    def test_size_limit_is_inclusive(self) -> None:
        assert validate_file(MediaFile("a.mp4", "video/mp4", b"0" * TEN_MB)).ok

        result = validate_file(MediaFile("a.mp4", "video/mp4", b"0" * (TEN_MB + 1)))
        assert result.reason is RejectionReason.FILE_TOO_LARGE
        assert result.message == "File size should be less than 10MB"

    def test_oversized_reports_size_regardless_of_type(self) -> None:
        result = validate_file(MediaFile("a.zip", "application/zip", b"0" * (TEN_MB + 1)))
        assert result.reason is RejectionReason.FILE_TOO_LARGE

    def test_unsupported_type(self) -> None:
        result = validate_file(MediaFile("notes.pdf", "application/pdf", b"%PDF"))
        assert result.reason is RejectionReason.UNSUPPORTED_TYPE

    def test_wildcard_accepts_any_video(self) -> None:
        assert validate_file(MediaFile("clip.mkv", "video/x-matroska", b"0")).ok

    def test_missing_type_uses_extension(self) -> None:
        assert validate_file(MediaFile("clip.mp4", "", b"0")).ok

    def test_custom_policy(self) -> None:
        policy = UploadPolicy(max_bytes=4, allowed_mime_types=("image/png",))
        assert validate_file(MediaFile("a.png", "image/png", b"1234"), policy).ok
        assert not validate_file(MediaFile("a.gif", "image/gif", b"1234"), policy).ok

    def test_picker_policy_is_wildcard(self) -> None:
        assert PICKER_POLICY.allowed_mime_types == ("image/*", "video/*")
