from media_relay.schemas.relay import (
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    RouteNotFoundResponse,
    UploadResponse,
)

__all__ = [
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "RouteNotFoundResponse",
    "UploadResponse",
]
