"""Backend REST API adapter."""

from composer.infrastructure.backend.http_client import BackendApiClient

__all__ = ["BackendApiClient"]
