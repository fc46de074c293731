"""Pydantic models for the photo listing response."""

from pydantic import RootModel

from photo_gallery.core.models.photo import PhotoSummary


class ListPhotosResponse(RootModel[list[PhotoSummary]]):
    """JSON array of photo summaries, newest first."""
