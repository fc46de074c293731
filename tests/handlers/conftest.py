from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from photo_gallery.core.models.errors import (
    NotFoundError,
    PhotoDeletionFailedError,
    PhotoDownloadFailedError,
    PhotoListFailedError,
    PhotoUploadFailedError,
    StorageError,
)
from photo_gallery.core.models.photo import StoredPhoto
from photo_gallery.core.repositories.storage_repository import PhotoStorageRepository
from photo_gallery.main import create_app


class FakeBody:
    """In-memory object body that records whether it was closed."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.closed = False
        self.close_calls = 0

    def iter_chunks(self, chunk_size: int = 1024) -> Iterator[bytes]:
        for start in range(0, len(self._data), chunk_size):
            yield self._data[start : start + chunk_size]

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1


class FakeStorage(PhotoStorageRepository):
    """Dict-backed storage with per-operation failure switches."""

    def __init__(self) -> None:
        self.objects: dict[str, dict] = {}
        self.failing: set[str] = set()
        self.opened: list[FakeBody] = []
        self.ensure_calls = 0

    def add(
        self,
        name: str,
        data: bytes = b"data",
        *,
        content_type: str | None = None,
        last_modified: datetime | None = None,
    ) -> None:
        self.objects[name] = {
            "data": data,
            "content_type": content_type,
            "last_modified": last_modified or datetime.now(timezone.utc),
        }

    def ensure_bucket(self) -> bool:
        self.ensure_calls += 1
        if "ensure_bucket" in self.failing:
            raise StorageError(message="bucket unavailable")
        return False

    def list_objects(self) -> list[StoredPhoto]:
        if "list_objects" in self.failing:
            raise PhotoListFailedError(message="listing unavailable")
        return [
            StoredPhoto(
                name=name,
                size=len(obj["data"]),
                last_modified=obj["last_modified"],
                content_type=obj["content_type"],
            )
            for name, obj in self.objects.items()
        ]

    def stat_photo(self, *, name: str) -> StoredPhoto:
        if "stat_photo" in self.failing:
            raise PhotoDownloadFailedError(message="stat unavailable")
        if name not in self.objects:
            raise NotFoundError(message="Photo not found")
        obj = self.objects[name]
        return StoredPhoto(
            name=name,
            size=len(obj["data"]),
            last_modified=obj["last_modified"],
            content_type=obj["content_type"],
        )

    def open_photo(self, *, name: str) -> FakeBody:
        if "open_photo" in self.failing:
            raise PhotoDownloadFailedError(message="read unavailable")
        if name not in self.objects:
            raise NotFoundError(message="Photo not found")
        body = FakeBody(self.objects[name]["data"])
        self.opened.append(body)
        return body

    def upload_photo(self, *, name: str, file_data: bytes, content_type: str) -> None:
        if "upload_photo" in self.failing:
            raise PhotoUploadFailedError(message="upload unavailable")
        self.add(name, file_data, content_type=content_type)

    def remove_photo(self, *, name: str) -> None:
        if "remove_photo" in self.failing:
            raise PhotoDeletionFailedError(message="delete unavailable")
        self.objects.pop(name, None)


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def client(app_settings, fake_storage) -> Iterator[TestClient]:
    with TestClient(create_app(app_settings, fake_storage)) as test_client:
        yield test_client
