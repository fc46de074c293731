"""
Business logic for photo listing.
"""

from aws_lambda_powertools import Logger

from photo_gallery.core.models.photo import PhotoSummary, StoredPhoto
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import SERVICE_NAME
from photo_gallery.core.utils.mime import is_image_name
from photo_gallery.core.utils.validators import build_photo_url

logger = Logger(service=SERVICE_NAME, UTC=True)


class ListService:
    """Application service responsible for listing photos.

    This service coordinates:
    - Fetching every object from the bucket
    - Dropping directory markers and non-image keys
    - Sorting newest first
    """

    def __init__(self, storage: PhotoStorageRepository) -> None:
        self.storage = storage

    def list_photos(self) -> list[PhotoSummary]:
        """List photos sorted by last-modified time, newest first.

        Raises:
            PhotoListFailedError: If the storage listing fails
        """
        objects = self.storage.list_objects()

        photos = self._sort_newest_first(
            [obj for obj in objects if is_image_name(obj.name)]
        )

        logger.info(
            "Photos listed successfully",
            extra={"objects": len(objects), "count": len(photos)},
        )

        return [
            PhotoSummary(
                name=photo.name,
                size=photo.size,
                last_modified=photo.last_modified,
                url=build_photo_url(photo.name),
            )
            for photo in photos
        ]

    @staticmethod
    def _sort_newest_first(photos: list[StoredPhoto]) -> list[StoredPhoto]:
        return sorted(photos, key=lambda photo: photo.last_modified, reverse=True)
