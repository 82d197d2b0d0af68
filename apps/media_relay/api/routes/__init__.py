"""Relay route modules."""

from . import health, relay  # noqa: F401

__all__ = ["health", "relay"]
