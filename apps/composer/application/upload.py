"""Upload Client

Validates, names and sends one media file to the relay. One attempt per call;
the caller decides whether to retry.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from media_policy import DEFAULT_KEY_NAMESPACE, UploadPolicy, effective_content_type

from composer.application.common.exceptions import UploadError, UploadErrorKind
from composer.application.keys import KeyGenerator, object_key
from composer.application.ports.relay import MediaRelayPort, RelayResponse, RelayTransportError
from composer.application.validation import PICKER_POLICY, validate_file
from composer.domain.media import MediaFile

logger = logging.getLogger(__name__)

STORAGE_FAILURE_MESSAGE = "Upload failed. Please try again."
NETWORK_FAILURE_MESSAGE = "Could not reach the upload service. Check your connection and try again."


def _error_from_response(response: RelayResponse) -> UploadError:
    if response.status_code >= 500:
        return UploadError(
            UploadErrorKind.STORAGE_FAILURE,
            STORAGE_FAILURE_MESSAGE,
            http_status=response.status_code,
        )
    return UploadError(
        UploadErrorKind.RELAY_REJECTED,
        response.error_message,
        http_status=response.status_code,
    )


class UploadClient:
    """Returns the stored filename; the post record keeps exactly that value."""

    def __init__(
        self,
        relay: MediaRelayPort,
        key_generator: KeyGenerator | None = None,
        policy: UploadPolicy = PICKER_POLICY,
        namespace: str = DEFAULT_KEY_NAMESPACE,
    ) -> None:
        self._relay = relay
        self._keys = key_generator or KeyGenerator()
        self._policy = policy
        self._namespace = namespace

    @property
    def policy(self) -> UploadPolicy:
        return self._policy

    async def upload(self, file: MediaFile | None, prefix: str) -> str:
        result = validate_file(file, self._policy)
        if not result.ok:
            raise UploadError(UploadErrorKind.VALIDATION, result.message, reason=result.reason)

        # the type the validator matched
        content_type = effective_content_type(file.content_type, file.filename) or "application/octet-stream"
        filename = self._keys.generate(prefix, file.filename, content_type)
        key = object_key(filename, self._namespace)

        logger.info(
            "Uploading media",
            extra={"key": key, "content_type": content_type, "size": file.size},
        )

        try:
            response = await self._relay.upload(key, file.data, content_type)
        except RelayTransportError as e:
            logger.warning("Relay unreachable", extra={"key": key, "error": e.message})
            raise UploadError(UploadErrorKind.NETWORK_FAILURE, NETWORK_FAILURE_MESSAGE) from e

        if not response.ok:
            error = _error_from_response(response)
            logger.warning(
                "Relay rejected upload",
                extra={"key": key, "status": response.status_code, "kind": error.kind.value},
            )
            raise error

        logger.info("Media uploaded", extra={"key": key})
        return filename

    async def upload_many(self, files: Sequence[MediaFile], prefix: str) -> list[str]:
        """Upload concurrently; keys come back in input order. First failure propagates."""
        return list(await asyncio.gather(*(self.upload(file, prefix) for file in files)))

    async def delete(self, filename: str) -> None:
        key = object_key(filename, self._namespace)
        try:
            response = await self._relay.delete(key)
        except RelayTransportError as e:
            raise UploadError(UploadErrorKind.NETWORK_FAILURE, NETWORK_FAILURE_MESSAGE) from e

        if not response.ok:
            raise _error_from_response(response)
        logger.info("Media deleted", extra={"key": key})

    async def close(self) -> None:
        await self._relay.close()
