from composer.application.common.exceptions import (
    AIError,
    AIErrorKind,
    AssistUnavailableError,
    BackendApiError,
    ComposerClosedError,
    ComposerError,
    FormValidationError,
    InvalidCategoryNameError,
    InvalidJsonError,
    NoJsonObjectError,
    SubmissionInProgressError,
    UploadError,
    UploadErrorKind,
    UpstreamRejectedError,
)

__all__ = [
    "AIError",
    "AIErrorKind",
    "AssistUnavailableError",
    "BackendApiError",
    "ComposerClosedError",
    "ComposerError",
    "FormValidationError",
    "InvalidCategoryNameError",
    "InvalidJsonError",
    "NoJsonObjectError",
    "SubmissionInProgressError",
    "UploadError",
    "UploadErrorKind",
    "UpstreamRejectedError",
]
