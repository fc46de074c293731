"""Custom exception classes for the photo gallery service."""

from http import HTTPStatus
from typing import Any

from photo_gallery.core.utils.constants import (
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_MISSING_FILE,
    ERROR_CODE_PHOTO_DELETE_FAILED,
    ERROR_CODE_PHOTO_DOWNLOAD_FAILED,
    ERROR_CODE_PHOTO_LIST_FAILED,
    ERROR_CODE_PHOTO_UPLOAD_FAILED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE,
    ERROR_CODE_UNSUPPORTED_MIME_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
)


class PhotoServiceError(Exception):
    """
    Base exception for all photo service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    Each subclass declares the HTTP status it maps to.
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(PhotoServiceError):
    """Raised when request validation fails."""

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MissingFileError(ValidationError):
    """Raised when an upload request carries no file."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_MISSING_FILE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MIMETypeError(ValidationError):
    """Raised when an unsupported MIME type is provided."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_MIME_TYPE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileSizeError(ValidationError):
    """Raised when file size exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(PhotoServiceError):
    """Raised when a requested resource is not found."""

    status = HTTPStatus.NOT_FOUND

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageError(PhotoServiceError):
    """Raised when an object storage operation fails."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PhotoListFailedError(StorageError):
    """Raised when the bucket listing fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PHOTO_LIST_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PhotoDownloadFailedError(StorageError):
    """Raised when a photo cannot be read from storage."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PHOTO_DOWNLOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PhotoUploadFailedError(StorageError):
    """Raised when a photo cannot be written to storage."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PHOTO_UPLOAD_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PhotoDeletionFailedError(StorageError):
    """Raised when a photo cannot be deleted from storage."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PHOTO_DELETE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
