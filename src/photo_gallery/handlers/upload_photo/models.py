"""Pydantic models for photo upload response."""

from pydantic import BaseModel, Field


class PhotoUploadResponse(BaseModel):
    """Response model for successful photo upload."""

    message: str = Field(..., description="Success message")
    name: str = Field(..., description="Object name the photo was stored under")
    url: str = Field(..., description="Relative URL to fetch the photo")
