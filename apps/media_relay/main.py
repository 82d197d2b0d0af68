import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from media_relay.api.errors import register_exception_handlers
from media_relay.api.middleware import CORSHeadersMiddleware
from media_relay.api.routes import health, relay
from media_relay.core.config import Settings, get_settings
from media_relay.core.constants import SERVICE_NAME, SERVICE_VERSION
from media_relay.core.logging import configure_logging
from media_relay.metrics import register_metrics
from media_relay.services.relay import RelayService
from media_relay.storage import ObjectStorage, create_storage

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Media relay started",
        extra={
            "service": SERVICE_NAME,
            "storage_backend": settings.storage_backend,
            "max_file_size": settings.max_file_size,
            "allowed_origins": settings.allowed_origins,
        },
    )
    yield
    logger.info("Media relay stopped")


def create_app(
    settings: Settings | None = None,
    storage: ObjectStorage | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    storage = storage or create_storage(settings)

    app = FastAPI(
        title="Media Relay",
        description="Validated uploads and reads for the Powder Feed media bucket",
        version=SERVICE_VERSION,
        docs_url="/docs",
        openapi_url="/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relay_service = RelayService(storage, settings.upload_policy())

    app.add_middleware(CORSHeadersMiddleware, allow_origin=settings.allowed_origins)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(relay.router)
    register_metrics(app)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
