"""Stored key -> public URL.

Pure string computation; the URL is dereferenced by whoever renders it.
"""

from __future__ import annotations

from media_policy import DEFAULT_KEY_NAMESPACE

ABSOLUTE_PREFIXES = ("http://", "https://", "data:", "blob:")


def is_absolute_url(value: str) -> bool:
    return value.lower().startswith(ABSOLUTE_PREFIXES)


def strip_namespace(key: str, namespace: str = DEFAULT_KEY_NAMESPACE) -> str:
    cleaned = key.lstrip("/")
    while cleaned.startswith(namespace):
        cleaned = cleaned[len(namespace):]
    return cleaned


def resolve_media_url(
    key: str | None,
    public_base_url: str,
    namespace: str = DEFAULT_KEY_NAMESPACE,
) -> str | None:
    if not key:
        return None
    if is_absolute_url(key):
        return key
    base = public_base_url.rstrip("/")
    return f"{base}/{namespace}{strip_namespace(key, namespace)}"


def key_from_url(
    url: str | None,
    public_base_url: str,
    namespace: str = DEFAULT_KEY_NAMESPACE,
) -> str | None:
    """Inverse of resolve_media_url for URLs under the public base."""
    if not url:
        return None
    if not is_absolute_url(url):
        return strip_namespace(url, namespace)
    root = f"{public_base_url.rstrip('/')}/{namespace}"
    if not url.startswith(root):
        return None
    return strip_namespace(url[len(root):], namespace) or None


class URLResolver:
    def __init__(self, public_base_url: str, namespace: str = DEFAULT_KEY_NAMESPACE) -> None:
        if not public_base_url:
            raise ValueError("public_base_url is required")
        self._base = public_base_url.rstrip("/")
        self._namespace = namespace

    def resolve(self, key: str | None) -> str | None:
        return resolve_media_url(key, self._base, self._namespace)

    def key_for(self, url: str | None) -> str | None:
        return key_from_url(url, self._base, self._namespace)
