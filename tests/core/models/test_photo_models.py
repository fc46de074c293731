from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from photo_gallery.core.models.photo import PhotoSummary, StoredPhoto

MODIFIED = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


class TestStoredPhoto:
    def test_valid(self) -> None:
        photo = StoredPhoto(name="a.jpg", size=1, last_modified=MODIFIED)

        assert photo.content_type is None

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StoredPhoto(name="a.jpg", size=-1, last_modified=MODIFIED)


class TestPhotoSummary:
    def test_serializes_with_camel_case_alias(self) -> None:
        summary = PhotoSummary(
            name="a.jpg",
            size=3,
            last_modified=MODIFIED,
            url="/api/photos/a.jpg",
        )

        dumped = summary.model_dump(mode="json", by_alias=True)

        assert set(dumped) == {"name", "size", "lastModified", "url"}
        assert dumped["lastModified"].startswith("2024-01-01T10:00:00")

    def test_accepts_alias_on_input(self) -> None:
        summary = PhotoSummary(
            name="a.jpg",
            size=3,
            lastModified=MODIFIED,
            url="/api/photos/a.jpg",
        )

        assert summary.last_modified == MODIFIED
