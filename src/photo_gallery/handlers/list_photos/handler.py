"""
HTTP handler responsible for listing the photos in the bucket.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from photo_gallery.core.models.errors import StorageError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import (
    MESSAGE_LIST_FAILED,
    PHOTOS_PATH,
    SERVICE_NAME,
)
from photo_gallery.core.utils.response import ResponseBuilder
from photo_gallery.handlers.dependencies import (
    get_request_id,
    get_storage,
    request_log_context,
)

from .models import ListPhotosResponse
from .service import ListService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["photos"])


@router.get(PHOTOS_PATH, response_model=ListPhotosResponse)
def list_photos(
    request: Request,
    storage: PhotoStorageRepository = Depends(get_storage),
) -> JSONResponse:
    """
    Handle requests to list photos.

    Returns every image object in the bucket as
    ``{name, size, lastModified, url}``, newest first.
    """
    logger.info("Received photo list request", extra=request_log_context(request))

    request_id = get_request_id(request)
    service = ListService(storage)

    try:
        photos = service.list_photos()
    except StorageError:
        logger.exception("Listing photos failed", extra={"request_id": request_id})
        return ResponseBuilder.internal_error(
            MESSAGE_LIST_FAILED,
            request_id=request_id,
        )

    body = ListPhotosResponse(photos).model_dump(mode="json", by_alias=True)
    return ResponseBuilder.ok(body, request_id=request_id)
