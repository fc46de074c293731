"""Abstract contract for photo file storage."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Protocol

from photo_gallery.core.models.photo import StoredPhoto


class PhotoBody(Protocol):
    """Readable object body handed out by a storage backend."""

    def iter_chunks(self, chunk_size: int = ...) -> Iterator[bytes]: ...

    def close(self) -> None: ...


class PhotoStorageRepository(ABC):
    """Contract for storing and retrieving photo files.

    Implementations could be S3, MinIO, GCS, local disk, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def ensure_bucket(self) -> bool:
        """Create the backing bucket if it does not exist.

        Returns:
            True if the bucket was created, False if it already existed

        Raises:
            StorageError: If the bucket cannot be checked or created
        """

    @abstractmethod
    def list_objects(self) -> list[StoredPhoto]:
        """Return metadata for every object in the bucket.

        Raises:
            PhotoListFailedError: If the listing fails
        """

    @abstractmethod
    def stat_photo(self, *, name: str) -> StoredPhoto:
        """Fetch metadata for a single object.

        Raises:
            NotFoundError: If the object does not exist
            PhotoDownloadFailedError: If the backend fails
        """

    @abstractmethod
    def open_photo(self, *, name: str) -> PhotoBody:
        """Open the object body for streaming. Callers must close it.

        Raises:
            NotFoundError: If the object does not exist
            PhotoDownloadFailedError: If the backend fails
        """

    @abstractmethod
    def upload_photo(self, *, name: str, file_data: bytes, content_type: str) -> None:
        """Store photo bytes under the given name.

        Raises:
            PhotoUploadFailedError: If the write fails
        """

    @abstractmethod
    def remove_photo(self, *, name: str) -> None:
        """Delete a photo. Deleting a missing object succeeds.

        Raises:
            PhotoDeletionFailedError: If deletion fails
        """
