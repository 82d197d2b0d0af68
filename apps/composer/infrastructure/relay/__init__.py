"""Media relay adapter."""

from composer.infrastructure.relay.http_client import RelayHttpClient

__all__ = ["RelayHttpClient"]
