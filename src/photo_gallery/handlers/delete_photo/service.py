"""Business logic for photo deletion.

Deletion is idempotent: removing a photo that is already gone is reported
as a success, so clients can safely retry.
"""

from aws_lambda_powertools import Logger

from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.core.utils.constants import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, UTC=True)


class DeleteService:
    """Application service responsible for deleting photos.

    It does not perform low-level infrastructure operations directly.
    """

    def __init__(self, storage: PhotoStorageRepository) -> None:
        self.storage = storage

    def delete_photo(self, name: str) -> None:
        """Delete the photo stored under ``name``.

        Args:
            name: Object name exactly as stored in the bucket

        Raises:
            PhotoDeletionFailedError: If the storage backend rejects the delete
        """
        logger.debug("Starting photo deletion", extra={"photo_name": name})

        self.storage.remove_photo(name=name)

        logger.info("Photo deleted successfully", extra={"photo_name": name})
