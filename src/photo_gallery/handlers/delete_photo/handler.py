"""
HTTP handler responsible for deleting a photo.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from photo_gallery.core.models.errors import StorageError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import (
    MESSAGE_DELETE_FAILED,
    MESSAGE_DELETE_SUCCEEDED,
    PHOTOS_PATH,
    SERVICE_NAME,
)
from photo_gallery.core.utils.response import ResponseBuilder
from photo_gallery.handlers.dependencies import (
    get_request_id,
    get_storage,
    request_log_context,
)

from .models import DeletePhotoRequest, DeletePhotoResponse
from .service import DeleteService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["photos"])


@router.delete(PHOTOS_PATH + "/{name:path}", response_model=DeletePhotoResponse)
def delete_photo(
    request: Request,
    name: str = Path(..., min_length=1),
    storage: PhotoStorageRepository = Depends(get_storage),
) -> JSONResponse:
    """
    Handle photo deletion requests.

    This function:
    - Takes the decoded object name from the path
    - Delegates deletion to the service layer
    - Translates storage failures into a 500 response
    """
    logger.info("Received photo delete request", extra=request_log_context(request))

    request_id = get_request_id(request)
    photo = DeletePhotoRequest(name=name)
    service = DeleteService(storage)

    try:
        service.delete_photo(photo.name)
    except StorageError:
        logger.exception(
            "Deletion failed",
            extra={"photo_name": photo.name, "request_id": request_id},
        )
        return ResponseBuilder.internal_error(
            MESSAGE_DELETE_FAILED,
            request_id=request_id,
        )

    response = DeletePhotoResponse(message=MESSAGE_DELETE_SUCCEEDED)
    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
