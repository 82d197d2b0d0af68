"""Exception Handlers.

Relay and routing errors are rendered in the relay JSON envelope
(`{"success": false, "error": ...}`).
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from media_relay.core.exceptions import RelayError
from media_relay.schemas import ErrorResponse, RouteNotFoundResponse


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers."""

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods both answer with the route listing.
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content=RouteNotFoundResponse().model_dump(by_alias=True),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(),
        )
