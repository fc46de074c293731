"""
FastAPI dependencies shared by the route handlers.

The storage repository is built once during application startup and kept on
``app.state``; handlers receive it through ``Depends`` instead of reaching for
a module-level client.
"""

import uuid
from typing import Any

from fastapi import Request

from photo_gallery.config import Settings
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import REQUEST_ID_HEADER


def get_storage(request: Request) -> PhotoStorageRepository:
    storage: PhotoStorageRepository = request.app.state.storage
    return storage


def get_app_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_request_id(request: Request) -> str:
    """Reuse the caller's request id or mint one for this request."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
    return str(request_id)


def request_log_context(request: Request) -> dict[str, Any]:
    """Common structured fields for the "received request" log line."""
    return {
        "http_method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params) or None,
        "request_id": get_request_id(request),
        "client": request.client.host if request.client else None,
    }
