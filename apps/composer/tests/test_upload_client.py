"""UploadClient tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from media_policy import RejectionReason

from composer.application.common.exceptions import UploadError, UploadErrorKind
from composer.application.keys import KeyGenerator
from composer.application.ports.relay import RelayResponse, RelayTransportError
from composer.application.upload import STORAGE_FAILURE_MESSAGE, UploadClient
from composer.domain.media import MediaFile

pytestmark = pytest.mark.asyncio


class TestUpload:
    """UploadClient.upload"""

    async def test_returns_filename_and_sends_namespaced_key(
        self, upload_client: UploadClient, mock_relay: MagicMock, jpeg: MediaFile
    ) -> None:
        key = await upload_client.upload(jpeg, "user42")

        assert key == "user42_20250115_093005_abcd1234.jpg"
        mock_relay.upload.assert_awaited_once_with(
            "uploads/user42_20250115_093005_abcd1234.jpg", jpeg.data, "image/jpeg"
        )

    async def test_validation_failure_skips_relay(
        self, upload_client: UploadClient, mock_relay: MagicMock
    ) -> None:
        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(MediaFile("a.pdf", "application/pdf", b"%PDF"), "post")

        assert exc_info.value.kind is UploadErrorKind.VALIDATION
        assert exc_info.value.reason is RejectionReason.UNSUPPORTED_TYPE
        mock_relay.upload.assert_not_awaited()

    async def test_missing_file(self, upload_client: UploadClient, mock_relay: MagicMock) -> None:
        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(None, "post")

        assert exc_info.value.reason is RejectionReason.NO_FILE
        mock_relay.upload.assert_not_awaited()

    async def test_relay_rejection_keeps_relay_message(
        self, upload_client: UploadClient, mock_relay: MagicMock, jpeg: MediaFile
    ) -> None:
        mock_relay.upload.return_value = RelayResponse(
            413, '{"success": false, "error": "File too large. Maximum size is 10MB"}', "Payload Too Large"
        )

        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(jpeg, "post")

        error = exc_info.value
        assert error.kind is UploadErrorKind.RELAY_REJECTED
        assert error.http_status == 413
        assert error.message == "File too large. Maximum size is 10MB"

    async def test_non_json_rejection_falls_back_to_status_line(
        self, upload_client: UploadClient, mock_relay: MagicMock, jpeg: MediaFile
    ) -> None:
        mock_relay.upload.return_value = RelayResponse(403, "", "Forbidden")

        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(jpeg, "post")

        assert exc_info.value.message == "403 Forbidden"

    async def test_storage_failure_is_generic(
        self, upload_client: UploadClient, mock_relay: MagicMock, jpeg: MediaFile
    ) -> None:
        mock_relay.upload.return_value = RelayResponse(
            500, '{"success": false, "error": "S3 AccessDenied arn:aws:..."}', "Internal Server Error"
        )

        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(jpeg, "post")

        assert exc_info.value.kind is UploadErrorKind.STORAGE_FAILURE
        assert exc_info.value.message == STORAGE_FAILURE_MESSAGE
        assert exc_info.value.http_status == 500

    async def test_network_failure(
        self, upload_client: UploadClient, mock_relay: MagicMock, jpeg: MediaFile
    ) -> None:
        mock_relay.upload.side_effect = RelayTransportError("Upload timed out")

        with pytest.raises(UploadError) as exc_info:
            await upload_client.upload(jpeg, "post")

        assert exc_info.value.kind is UploadErrorKind.NETWORK_FAILURE
        assert exc_info.value.http_status is None


    async def test_untyped_file_sends_guessed_type(
        self, upload_client: UploadClient, mock_relay: MagicMock
    ) -> None:
        photo = MediaFile("photo.jpg", "", b"\xff\xd8\xff")

        key = await upload_client.upload(photo, "post")

        assert key.endswith(".jpg")
        mock_relay.upload.assert_awaited_once_with(f"uploads/{key}", photo.data, "image/jpeg")

    async def test_generic_type_sends_guessed_type(
        self, upload_client: UploadClient, mock_relay: MagicMock
    ) -> None:
        clip = MediaFile("clip.mp4", "application/octet-stream", b"0000")

        await upload_client.upload(clip, "post")

        assert mock_relay.upload.await_args.args[2] == "video/mp4"


class TestUploadMany:
    """UploadClient.upload_many"""

    async def test_keys_in_input_order(self, mock_relay: MagicMock) -> None:
        suffixes = iter(["aaaaaaaa", "bbbbbbbb"])
        client = UploadClient(mock_relay, KeyGenerator(random_suffix=lambda: next(suffixes)))
        files = [MediaFile("a.png", "image/png", b"1"), MediaFile("b.mp4", "video/mp4", b"2")]

        keys = await client.upload_many(files, "post")

        assert [key.rsplit("_", 1)[1] for key in keys] == ["aaaaaaaa.png", "bbbbbbbb.mp4"]
        assert mock_relay.upload.await_count == 2


class TestDelete:
    """UploadClient.delete"""

    async def test_delete_uses_namespaced_key(self, upload_client: UploadClient, mock_relay: MagicMock) -> None:
        await upload_client.delete("post_20250115_093005_abcd1234.jpg")
        mock_relay.delete.assert_awaited_once_with("uploads/post_20250115_093005_abcd1234.jpg")

    async def test_delete_rejected(self, upload_client: UploadClient, mock_relay: MagicMock) -> None:
        mock_relay.delete.return_value = RelayResponse(400, '{"success": false, "error": "Invalid key format"}')

        with pytest.raises(UploadError) as exc_info:
            await upload_client.delete("x.jpg")

        assert exc_info.value.kind is UploadErrorKind.RELAY_REJECTED
