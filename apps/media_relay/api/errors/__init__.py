from media_relay.api.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
