"""Composer Application Layer."""

from composer.application.assist import (
    AIContentAssist,
    SuggestionFields,
    extract_json_object,
    merge_suggestion,
    parse_suggestion,
)
from composer.application.categories import CategoryStore
from composer.application.compose import PostComposer
from composer.application.keys import KeyGenerator, object_key
from composer.application.location import LocationSuggester
from composer.application.upload import UploadClient
from composer.application.urls import URLResolver, key_from_url, resolve_media_url
from composer.application.validation import ValidationResult, validate_file

__all__ = [
    "AIContentAssist",
    "CategoryStore",
    "KeyGenerator",
    "LocationSuggester",
    "PostComposer",
    "SuggestionFields",
    "URLResolver",
    "UploadClient",
    "ValidationResult",
    "extract_json_object",
    "key_from_url",
    "merge_suggestion",
    "object_key",
    "parse_suggestion",
    "resolve_media_url",
    "validate_file",
]
