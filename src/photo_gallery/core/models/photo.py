"""Shared photo models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class StoredPhoto(BaseModel):
    """Object metadata as reported by the storage backend."""

    name: StrictStr = Field(..., description="Object key in the bucket")
    size: StrictInt = Field(..., ge=0, description="Object size in bytes")
    last_modified: datetime = Field(..., description="Last modification time (UTC)")
    content_type: StrictStr | None = Field(None, description="Stored Content-Type, if any")


class PhotoSummary(BaseModel):
    """Photo entry returned by the list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field(..., description="Object key in the bucket")
    size: StrictInt = Field(..., description="Photo size in bytes")
    last_modified: datetime = Field(
        ...,
        alias="lastModified",
        description="ISO-8601 last modification timestamp (UTC)",
    )
    url: StrictStr = Field(..., description="Relative URL to fetch the photo")
