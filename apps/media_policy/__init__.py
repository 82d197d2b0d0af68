"""Shared upload policy."""

from media_policy.policy import (
    ALLOWED_MIME_TYPES,
    DEFAULT_KEY_NAMESPACE,
    DEFAULT_MAX_BYTES,
    MEDIA_WILDCARDS,
    RejectionReason,
    UploadPolicy,
    check_key,
    content_type_allowed,
    effective_content_type,
    evaluate_upload,
    exceeds_limit,
    normalize_content_type,
)

__all__ = [
    "ALLOWED_MIME_TYPES",
    "DEFAULT_KEY_NAMESPACE",
    "DEFAULT_MAX_BYTES",
    "MEDIA_WILDCARDS",
    "RejectionReason",
    "UploadPolicy",
    "check_key",
    "content_type_allowed",
    "effective_content_type",
    "evaluate_upload",
    "exceeds_limit",
    "normalize_content_type",
]
