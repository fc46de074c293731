"""S3-backed implementation of PhotoStorageRepository."""

from collections.abc import Mapping
from typing import Any, NoReturn, cast

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from photo_gallery.core.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from photo_gallery.core.models.errors import (
    NotFoundError,
    PhotoDeletionFailedError,
    PhotoDownloadFailedError,
    PhotoListFailedError,
    PhotoUploadFailedError,
    StorageError,
)
from photo_gallery.core.models.photo import StoredPhoto
from photo_gallery.core.repositories.storage_repository import (
    PhotoBody,
    PhotoStorageRepository,
)
from photo_gallery.core.utils.constants import (
    ERROR_CODE_BUCKET_SETUP_FAILED,
    ERROR_CODE_PHOTO_NOT_FOUND,
    MESSAGE_PHOTO_NOT_FOUND,
    SERVICE_NAME,
    STORAGE_NO_BUCKET_CODES,
    STORAGE_NOT_FOUND_CODES,
)
from photo_gallery.core.utils.time import ensure_utc

logger = Logger(service=SERVICE_NAME, UTC=True)


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))


class S3PhotoStorage(PhotoStorageRepository):
    """Photo storage implementation backed by an S3-compatible bucket."""

    def __init__(self, adapter: S3AdapterProtocol) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter

    @property
    def bucket(self) -> str:
        return self._s3.bucket

    def ensure_bucket(self) -> bool:
        """Create the configured bucket when it does not exist yet."""
        try:
            self._s3.head_bucket()
            logger.debug("Bucket exists", extra={"bucket": self.bucket})
            return False
        except ClientError as exc:
            if _error_code(exc) not in STORAGE_NO_BUCKET_CODES:
                logger.error("Bucket check failed", extra={"bucket": self.bucket})
                raise StorageError(
                    message="Unable to check storage bucket",
                    error_code=ERROR_CODE_BUCKET_SETUP_FAILED,
                    details={"bucket": self.bucket},
                ) from exc
        except BotoCoreError as exc:
            logger.exception("Unexpected error checking bucket")
            raise StorageError(
                message="Unable to check storage bucket",
                error_code=ERROR_CODE_BUCKET_SETUP_FAILED,
                details={"bucket": self.bucket},
            ) from exc

        try:
            self._s3.create_bucket()
        except (ClientError, BotoCoreError) as exc:
            logger.exception("Bucket creation failed", extra={"bucket": self.bucket})
            raise StorageError(
                message="Unable to create storage bucket",
                error_code=ERROR_CODE_BUCKET_SETUP_FAILED,
                details={"bucket": self.bucket},
            ) from exc

        logger.info("Bucket created", extra={"bucket": self.bucket})
        return True

    def list_objects(self) -> list[StoredPhoto]:
        """List every object in the bucket."""
        logger.debug("Listing objects", extra={"bucket": self.bucket})

        try:
            return [self._to_stored_photo(entry) for entry in self._s3.iter_objects()]

        except ClientError as exc:
            logger.error("S3 listing failed", extra={"bucket": self.bucket})
            raise PhotoListFailedError(
                message="Unable to list photos at this time",
                details={"bucket": self.bucket, "code": _error_code(exc)},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error listing objects")
            raise PhotoListFailedError(
                message="Unable to list photos at this time",
                details={"bucket": self.bucket},
            ) from exc

    def stat_photo(self, *, name: str) -> StoredPhoto:
        """Fetch size, timestamp and content type of a single object."""
        logger.debug("Fetching object metadata", extra={"key": name})

        try:
            response = self._s3.head_object(key=name)
        except ClientError as exc:
            self._raise_read_error(exc, name=name)
        except Exception as exc:
            logger.exception("Unexpected error fetching object metadata")
            raise PhotoDownloadFailedError(
                message="Unable to read photo at this time",
                details={"key": name},
            ) from exc

        return StoredPhoto(
            name=name,
            size=int(response.get("ContentLength", 0)),
            last_modified=ensure_utc(response["LastModified"]),
            content_type=response.get("ContentType") or None,
        )

    def open_photo(self, *, name: str) -> PhotoBody:
        """Open the object body; the caller owns closing it."""
        logger.debug("Opening object body", extra={"key": name})

        try:
            response = self._s3.get_object(key=name)
        except ClientError as exc:
            self._raise_read_error(exc, name=name)
        except Exception as exc:
            logger.exception("Unexpected error opening object body")
            raise PhotoDownloadFailedError(
                message="Unable to read photo at this time",
                details={"key": name},
            ) from exc

        return cast(PhotoBody, response["Body"])

    def upload_photo(self, *, name: str, file_data: bytes, content_type: str) -> None:
        """Upload photo bytes with their content type."""
        logger.debug(
            "Uploading photo",
            extra={"key": name, "size": len(file_data), "content_type": content_type},
        )

        try:
            self._s3.put_object(key=name, body=file_data, content_type=content_type)
            logger.info("Photo stored", extra={"key": name})

        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": name, "code": _error_code(exc)})
            raise PhotoUploadFailedError(
                message="Unable to upload photo at this time",
                details={"key": name},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading photo")
            raise PhotoUploadFailedError(
                message="Unable to upload photo at this time",
                details={"key": name},
            ) from exc

    def remove_photo(self, *, name: str) -> None:
        """Delete a photo object; a missing object counts as deleted."""
        logger.debug("Deleting photo", extra={"key": name})

        try:
            self._s3.delete_object(key=name)
            logger.info("Photo removed", extra={"key": name})

        except ClientError as exc:
            if _error_code(exc) in STORAGE_NOT_FOUND_CODES:
                logger.info("Photo already absent", extra={"key": name})
                return

            logger.error("S3 deletion failed", extra={"key": name, "code": _error_code(exc)})
            raise PhotoDeletionFailedError(
                message="Unable to delete photo at this time",
                details={"key": name},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting photo")
            raise PhotoDeletionFailedError(
                message="Unable to delete photo at this time",
                details={"key": name},
            ) from exc

    @staticmethod
    def _raise_read_error(exc: ClientError, *, name: str) -> NoReturn:
        if _error_code(exc) in STORAGE_NOT_FOUND_CODES:
            raise NotFoundError(
                message=MESSAGE_PHOTO_NOT_FOUND,
                error_code=ERROR_CODE_PHOTO_NOT_FOUND,
                details={"key": name},
            ) from exc

        logger.error("S3 read failed", extra={"key": name, "code": _error_code(exc)})
        raise PhotoDownloadFailedError(
            message="Unable to read photo at this time",
            details={"key": name},
        ) from exc

    @staticmethod
    def _to_stored_photo(entry: Mapping[str, Any]) -> StoredPhoto:
        return StoredPhoto(
            name=entry["Key"],
            size=int(entry.get("Size", 0)),
            last_modified=ensure_utc(entry["LastModified"]),
        )
