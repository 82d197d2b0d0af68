"""Relay request errors.

Each error maps to exactly one HTTP status and a client-facing message.
"""

from media_policy import RejectionReason, UploadPolicy


class RelayError(Exception):
    """Base class for errors returned in the relay JSON envelope."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MissingKeyError(RelayError):
    """`key` query parameter missing or empty."""

    def __init__(self) -> None:
        super().__init__("Missing key parameter")


class InvalidKeyError(RelayError):
    """Key outside the namespace or containing a traversal segment."""

    def __init__(self) -> None:
        super().__init__("Invalid key format")


class UnsupportedMediaTypeError(RelayError):
    """Content-Type not on the allow-list."""

    def __init__(self) -> None:
        super().__init__("Invalid file type. Only images and videos are allowed.")


class PayloadTooLargeError(RelayError):
    """Declared or streamed body over the size ceiling."""

    status_code = 413

    def __init__(self, max_megabytes: str) -> None:
        super().__init__(f"File too large. Maximum size is {max_megabytes}MB")


class ObjectNotFoundError(RelayError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("File not found")


def rejection_error(reason: RejectionReason, policy: UploadPolicy) -> RelayError:
    if reason is RejectionReason.MISSING_KEY:
        return MissingKeyError()
    if reason is RejectionReason.INVALID_KEY:
        return InvalidKeyError()
    if reason is RejectionReason.UNSUPPORTED_TYPE:
        return UnsupportedMediaTypeError()
    if reason is RejectionReason.FILE_TOO_LARGE:
        return PayloadTooLargeError(policy.max_megabytes)
    raise ValueError(f"No relay error for rejection reason {reason!r}")
