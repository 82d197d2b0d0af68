"""Setup Module."""

from composer.setup.config import ComposerSettings, get_settings
from composer.setup.dependencies import build_composer, build_upload_client, build_url_resolver

__all__ = [
    "ComposerSettings",
    "get_settings",
    "build_composer",
    "build_upload_client",
    "build_url_resolver",
]
