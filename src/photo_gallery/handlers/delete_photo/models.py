"""Pydantic models for delete photo request/response."""

from pydantic import BaseModel, Field


class DeletePhotoRequest(BaseModel):
    """Validation model for delete photo request."""

    name: str = Field(
        ...,
        min_length=1,
        description="Object name of the photo to delete",
    )


class DeletePhotoResponse(BaseModel):
    """Response model for successful photo deletion."""

    message: str = Field(..., description="Success message")
