"""
HTTP handler responsible for multipart photo uploads.
"""

from aws_lambda_powertools import Logger
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from photo_gallery.config import Settings
from photo_gallery.core.models.errors import StorageError, ValidationError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import (
    MESSAGE_UPLOAD_FAILED,
    PHOTOS_PATH,
    SERVICE_NAME,
    UPLOAD_FIELD_NAME,
)
from photo_gallery.core.utils.response import ResponseBuilder
from photo_gallery.handlers.dependencies import (
    get_app_settings,
    get_request_id,
    get_storage,
    request_log_context,
)

from .models import PhotoUploadResponse
from .service import UploadService

logger = Logger(service=SERVICE_NAME, UTC=True)

router = APIRouter(tags=["photos"])


@router.post(PHOTOS_PATH, response_model=PhotoUploadResponse)
def upload_photo(
    request: Request,
    photo: UploadFile | None = File(None, alias=UPLOAD_FIELD_NAME),
    storage: PhotoStorageRepository = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    Handle photo upload requests.

    Expects ``multipart/form-data`` with a single file in the ``photo``
    field. Validation failures map to 400, storage failures to 500.
    """
    logger.info("Received photo upload request", extra=request_log_context(request))

    request_id = get_request_id(request)
    service = UploadService(storage, max_file_size=settings.max_upload_size)

    try:
        response = service.upload_photo(
            file=photo.file if photo is not None else None,
            filename=photo.filename if photo is not None else None,
            content_type=photo.content_type if photo is not None else None,
        )

    except ValidationError as exc:
        logger.warning(
            "Upload rejected",
            extra={"error_code": exc.error_code, "request_id": request_id},
        )
        return ResponseBuilder.bad_request(
            exc.message,
            error=exc.error_code,
            details=exc.details or None,
            request_id=request_id,
        )

    except StorageError:
        logger.exception(
            "Infrastructure error during photo upload",
            extra={"request_id": request_id},
        )
        return ResponseBuilder.internal_error(
            MESSAGE_UPLOAD_FAILED,
            request_id=request_id,
        )

    finally:
        if photo is not None:
            photo.file.close()

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
