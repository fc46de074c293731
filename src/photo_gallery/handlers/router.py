"""Aggregate API router mounted under ``/api``."""

from fastapi import APIRouter

from photo_gallery.core.utils.constants import API_PREFIX
from photo_gallery.handlers.delete_photo.handler import router as delete_photo_router
from photo_gallery.handlers.get_photo.handler import router as get_photo_router
from photo_gallery.handlers.health.handler import router as health_router
from photo_gallery.handlers.list_photos.handler import router as list_photos_router
from photo_gallery.handlers.upload_photo.handler import router as upload_photo_router

api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(list_photos_router)
api_router.include_router(upload_photo_router)
api_router.include_router(get_photo_router)
api_router.include_router(delete_photo_router)
api_router.include_router(health_router)
