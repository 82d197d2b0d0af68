"""Composer domain."""

from composer.domain.auth import AuthContext
from composer.domain.categories import CategorySelection, category_key, normalize_category_name
from composer.domain.draft import DraftPost
from composer.domain.media import MediaFile

__all__ = [
    "AuthContext",
    "CategorySelection",
    "DraftPost",
    "MediaFile",
    "category_key",
    "normalize_category_name",
]
