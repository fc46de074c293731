"""Business logic for photo upload operations.

This module validates an incoming file, derives a unique object name and
writes the bytes to storage, translating failures into domain errors.
"""

from typing import BinaryIO

from aws_lambda_powertools import Logger

from photo_gallery.core.models.errors import MissingFileError
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import (
    MAX_FILE_SIZE,
    MESSAGE_NO_FILE,
    MESSAGE_UPLOAD_SUCCEEDED,
    SERVICE_NAME,
    format_file_size,
)
from photo_gallery.core.utils.time import epoch_millis
from photo_gallery.core.utils.validators import (
    build_photo_url,
    sanitize_filename,
    validate_file_size,
    validate_mime_type,
)

from .models import PhotoUploadResponse

logger = Logger(service=SERVICE_NAME, UTC=True)


class UploadService:
    """Application service responsible for photo uploads.

    This service orchestrates:
    - Validation of the declared MIME type and payload size
    - Naming the object as ``<epoch millis>-<original basename>``
    - Uploading the bytes to storage
    """

    def __init__(
        self,
        storage: PhotoStorageRepository,
        *,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        self.storage = storage
        self.max_file_size = max_file_size

    @staticmethod
    def generate_photo_name(filename: str | None) -> str:
        """Generate the object name for a new upload."""
        return f"{epoch_millis()}-{sanitize_filename(filename)}"

    def read_file(self, file: BinaryIO) -> bytes:
        """Read at most one byte past the limit.

        The part is already spooled to disk by the multipart parser; this only
        keeps an oversize file out of memory.

        Raises:
            FileSizeError: If the file is larger than the limit
        """
        file_data = file.read(self.max_file_size + 1)
        validate_file_size(len(file_data), max_size=self.max_file_size)
        return file_data

    def upload_photo(
        self,
        *,
        file: BinaryIO | None,
        filename: str | None,
        content_type: str | None,
    ) -> PhotoUploadResponse:
        """Validate and store a single uploaded photo.

        The upload flow is:
        1. Reject requests without a file
        2. Validate the declared MIME type
        3. Read the payload and enforce the size limit
        4. Upload under a fresh timestamped name

        Args:
            file: Readable file object, or None when no file was sent
            filename: Client-supplied filename
            content_type: Client-declared MIME type

        Returns:
            Confirmation with the stored name and its URL

        Raises:
            MissingFileError: If no file was provided
            MIMETypeError: If the MIME type is not an accepted image type
            FileSizeError: If the file exceeds the limit
            PhotoUploadFailedError: If storage upload fails
        """
        if file is None:
            raise MissingFileError(message=MESSAGE_NO_FILE)

        mime_type = validate_mime_type(content_type)
        file_data = self.read_file(file)
        name = self.generate_photo_name(filename)

        logger.debug(
            "Starting photo upload",
            extra={
                "photo_name": name,
                "size": format_file_size(len(file_data)),
                "mime_type": mime_type,
            },
        )

        self.storage.upload_photo(
            name=name,
            file_data=file_data,
            content_type=mime_type,
        )

        logger.info("Photo uploaded successfully", extra={"photo_name": name})

        return PhotoUploadResponse(
            message=MESSAGE_UPLOAD_SUCCEEDED,
            name=name,
            url=build_photo_url(name),
        )
