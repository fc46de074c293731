import mimetypes
from collections.abc import Mapping
from pathlib import PurePosixPath

from photo_gallery.core.utils.constants import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    DEFAULT_PHOTO_CONTENT_TYPE,
)

# mimetypes has no webp entry on some platforms
EXTENSION_MIME_TYPES: Mapping[str, str] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}

# Defaults S3 and MinIO report when no type was given at upload
GENERIC_CONTENT_TYPES = frozenset({"binary/octet-stream", "application/octet-stream"})


def get_extension(name: str) -> str:
    """Return the lower-cased extension of an object name without the dot."""
    return PurePosixPath(name).suffix.lower().lstrip(".")


def is_image_name(name: str) -> bool:
    """Whether an object name looks like a photo we serve."""
    if not name or name.endswith("/"):
        return False
    return get_extension(name) in ALLOWED_EXTENSIONS


def is_allowed_mime_type(mime_type: str | None) -> bool:
    if not mime_type:
        return False
    return mime_type.split(";", 1)[0].strip().lower() in ALLOWED_MIME_TYPES


def resolve_content_type(name: str, stored: str | None = None) -> str:
    """Pick the Content-Type to serve a photo with.

    The stored object metadata wins unless it is a generic default.
    Otherwise the type is guessed from the name, falling back to JPEG.
    """
    if stored and stored.lower() not in GENERIC_CONTENT_TYPES:
        return stored

    extension = get_extension(name)
    if extension in EXTENSION_MIME_TYPES:
        return EXTENSION_MIME_TYPES[extension]

    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_PHOTO_CONTENT_TYPE
