"""Pydantic models for photo retrieval."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GetPhotoRequest(BaseModel):
    """Validation model for get photo request."""

    name: str = Field(..., min_length=1, description="Object name of the photo")


class PhotoDownload(BaseModel):
    """An opened photo ready to be streamed back to the client.

    ``body`` is the backend stream; whoever streams it must close it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    content_type: str
    size: int = Field(..., ge=0)
    body: Any = Field(..., exclude=True)
