"""Composer errors.

Every error carries a user-presentable `message`.
"""

from __future__ import annotations

from enum import Enum

from media_policy import RejectionReason


class ComposerError(Exception):
    """Base class for composer errors."""

    def __init__(self, message: str = "Something went wrong") -> None:
        self.message = message
        super().__init__(message)


class UploadErrorKind(str, Enum):
    VALIDATION = "Validation"
    RELAY_REJECTED = "RelayRejected"
    STORAGE_FAILURE = "StorageFailure"
    NETWORK_FAILURE = "NetworkFailure"


class UploadError(ComposerError):
    def __init__(
        self,
        kind: UploadErrorKind,
        message: str,
        *,
        http_status: int | None = None,
        reason: RejectionReason | None = None,
    ) -> None:
        self.kind = kind
        self.http_status = http_status
        self.reason = reason
        super().__init__(message)

    def __repr__(self) -> str:
        return f"UploadError(kind={self.kind.value}, http_status={self.http_status}, message={self.message!r})"


class AIErrorKind(str, Enum):
    MALFORMED_RESPONSE = "MalformedResponse"
    UPSTREAM_REJECTED = "UpstreamRejected"


class AIError(ComposerError):
    def __init__(self, kind: AIErrorKind, message: str, *, status: int | None = None) -> None:
        self.kind = kind
        self.status = status
        super().__init__(message)


class NoJsonObjectError(AIError):
    """Reply text has no balanced `{...}` span."""

    def __init__(self) -> None:
        super().__init__(AIErrorKind.MALFORMED_RESPONSE, "AI reply did not contain a JSON object")


class InvalidJsonError(AIError):
    """Candidate span is not a JSON object."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(AIErrorKind.MALFORMED_RESPONSE, f"AI reply JSON could not be parsed: {detail}")


class UpstreamRejectedError(AIError):
    def __init__(self, status: int | None, detail: str = "") -> None:
        message = "AI service request failed"
        if status is not None:
            message = f"{message} ({status})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(AIErrorKind.UPSTREAM_REJECTED, message, status=status)


class AssistUnavailableError(ComposerError):
    def __init__(self) -> None:
        super().__init__("AI assist is not configured")


class BackendApiError(ComposerError):
    """Non-2xx reply or transport failure talking to the backend REST API."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class InvalidCategoryNameError(ComposerError):
    def __init__(self) -> None:
        super().__init__("Category name must not be empty")


class FormValidationError(ComposerError):
    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(next(iter(self.errors.values()), "Please fix the highlighted fields"))


class SubmissionInProgressError(ComposerError):
    def __init__(self) -> None:
        super().__init__("This post is already being published")


class ComposerClosedError(ComposerError):
    def __init__(self) -> None:
        super().__init__("The post form has been closed")
