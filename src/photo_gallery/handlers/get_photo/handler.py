"""
HTTP handler responsible for streaming a photo's bytes.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import Response
from starlette.background import BackgroundTask

from photo_gallery.core.models.errors import PhotoServiceError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import (
    ERROR_CODE_PHOTO_NOT_FOUND,
    MESSAGE_PHOTO_NOT_FOUND,
    PHOTO_CACHE_CONTROL,
    PHOTOS_PATH,
    SERVICE_NAME,
)
from photo_gallery.core.utils.response import ResponseBuilder
from photo_gallery.handlers.dependencies import (
    get_request_id,
    get_storage,
    request_log_context,
)

from .models import GetPhotoRequest
from .service import GetService, iter_photo_body

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["photos"])


@router.get(
    PHOTOS_PATH + "/{name:path}",
    response_class=Response,
    responses={200: {"content": {"image/*": {}}}},
)
def get_photo(
    request: Request,
    name: str = Path(..., min_length=1),
    storage: PhotoStorageRepository = Depends(get_storage),
) -> Response:
    """
    Handle photo view requests.

    Every failure to read the object, missing or otherwise, is
    reported to the client as 404 "Photo not found".
    """
    logger.info("Received photo view request", extra=request_log_context(request))

    request_id = get_request_id(request)
    photo = GetPhotoRequest(name=name)
    service = GetService(storage)

    try:
        download = service.open_photo(photo.name)
    except PhotoServiceError as exc:
        logger.warning(
            "Photo could not be read",
            extra={
                "photo_name": photo.name,
                "error_code": exc.error_code,
                "request_id": request_id,
            },
        )
        return ResponseBuilder.not_found(
            MESSAGE_PHOTO_NOT_FOUND,
            error=ERROR_CODE_PHOTO_NOT_FOUND,
            request_id=request_id,
        )

    return ResponseBuilder.stream(
        iter_photo_body(download.body),
        content_type=download.content_type,
        content_length=download.size,
        headers={"Cache-Control": PHOTO_CACHE_CONTROL},
        background=BackgroundTask(download.body.close),
        request_id=request_id,
    )
