"""
Business logic for photo retrieval.

Metadata is read first so the response headers are known before the body
is opened; a photo that disappears in between surfaces as not found.
"""

from collections.abc import Iterator

from aws_lambda_powertools import Logger

from photo_gallery.core.repositories.storage_repository import (
    PhotoBody,
    PhotoStorageRepository,
)
from photo_gallery.core.utils.constants import SERVICE_NAME, STREAM_CHUNK_SIZE
from photo_gallery.core.utils.mime import resolve_content_type

from .models import PhotoDownload

logger = Logger(service=SERVICE_NAME, UTC=True)


def iter_photo_body(
    body: PhotoBody, chunk_size: int = STREAM_CHUNK_SIZE
) -> Iterator[bytes]:
    """Yield the body in chunks. Closing the body is left to the caller."""
    yield from body.iter_chunks(chunk_size)


class GetService:
    """Application service responsible for retrieving photo bytes."""

    def __init__(self, storage: PhotoStorageRepository) -> None:
        self.storage = storage

    def open_photo(self, name: str) -> PhotoDownload:
        """
        Look up a photo and open its body for streaming.

        Args:
            name: Object name exactly as stored in the bucket

        Returns:
            PhotoDownload carrying headers and the open body

        Raises:
            NotFoundError: If the object does not exist
            PhotoDownloadFailedError: If the backend fails
        """
        logger.debug("Fetching photo", extra={"photo_name": name})

        stat = self.storage.stat_photo(name=name)
        content_type = resolve_content_type(name, stat.content_type)
        body = self.storage.open_photo(name=name)

        logger.info(
            "Photo opened for streaming",
            extra={
                "photo_name": name,
                "size": stat.size,
                "content_type": content_type,
            },
        )

        return PhotoDownload(
            name=name,
            content_type=content_type,
            size=stat.size,
            body=body,
        )
