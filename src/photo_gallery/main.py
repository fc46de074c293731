"""
Application factory and server entry point.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from aws_lambda_powertools import Logger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from photo_gallery import __description__, __version__
from photo_gallery.config import Settings, get_settings
from photo_gallery.core.infrastructure.adapters.s3_adapter import S3Adapter
from photo_gallery.core.infrastructure.aws.s3_photo_storage import S3PhotoStorage
from photo_gallery.core.models.errors import StorageError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import REQUEST_ID_HEADER, SERVICE_NAME
from photo_gallery.core.utils.exception_handlers import configure_exception_handlers
from photo_gallery.handlers.router import api_router
from photo_gallery.static import SPAStaticFiles

logger = Logger(service=SERVICE_NAME, UTC=True)


def build_storage(settings: Settings) -> PhotoStorageRepository:
    return S3PhotoStorage(S3Adapter(settings))


def create_app(
    settings: Settings | None = None,
    storage: PhotoStorageRepository | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use instead of the process-wide ones
        storage: Storage to use instead of one built from settings

    Returns:
        Configured application. Storage is prepared when the lifespan starts.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.setLevel(settings.log_level.upper())

        app.state.settings = settings
        app.state.storage = storage or build_storage(settings)

        # A storage outage at boot must not keep the server down
        try:
            created = app.state.storage.ensure_bucket()
        except StorageError as exc:
            logger.error(
                "Bucket setup failed, continuing without it",
                extra={"bucket": settings.bucket_name, "error_code": exc.error_code},
            )
        else:
            if created:
                logger.info("Bucket created", extra={"bucket": settings.bucket_name})

        logger.info(
            "Photo gallery started",
            extra={
                "bucket": settings.bucket_name,
                "endpoint": settings.storage_endpoint_url,
                "static_dir": settings.static_dir,
            },
        )
        yield
        logger.info("Photo gallery stopped")

    app = FastAPI(
        title="Photo Gallery API",
        description=__description__,
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    configure_exception_handlers(app)

    app.include_router(api_router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        # Mounted last so every API route takes precedence
        app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(
            "Static directory not found, frontend disabled",
            extra={"static_dir": str(static_dir)},
        )

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
