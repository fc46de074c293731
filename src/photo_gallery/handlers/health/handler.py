"""Liveness probe."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from photo_gallery.core.utils.response import ResponseBuilder

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> JSONResponse:
    # Storage is not consulted; this only reports that the process is serving.
    return ResponseBuilder.ok({"status": "ok"})
