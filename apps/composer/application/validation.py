"""File validation before upload.

Advisory only: the relay repeats its own checks. Runs synchronously, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from media_policy import MEDIA_WILDCARDS, RejectionReason, UploadPolicy, content_type_allowed

from composer.domain.media import MediaFile

# Client-side default: anything the file picker's accept="image/*,video/*" lets through.
PICKER_POLICY = UploadPolicy(allowed_mime_types=MEDIA_WILDCARDS)


@dataclass(frozen=True)
class ValidationResult:
    reason: RejectionReason | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def accepted(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "ValidationResult":
        return cls(reason=reason, message=message)


def validate_file(file: MediaFile | None, policy: UploadPolicy = PICKER_POLICY) -> ValidationResult:
    if file is None or not file.filename or file.size == 0:
        return ValidationResult.rejected(RejectionReason.NO_FILE, "No file provided")

    if file.size > policy.max_bytes:
        return ValidationResult.rejected(
            RejectionReason.FILE_TOO_LARGE,
            f"File size should be less than {policy.max_megabytes}MB",
        )

    if not content_type_allowed(file.content_type, policy.allowed_mime_types, file.filename):
        return ValidationResult.rejected(
            RejectionReason.UNSUPPORTED_TYPE,
            "Please select a valid image or video file",
        )

    return ValidationResult.accepted()
