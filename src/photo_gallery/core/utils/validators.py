"""Request validation utilities."""

from pathlib import PurePosixPath, PureWindowsPath
from typing import Any
from urllib.parse import quote

from photo_gallery.core.models.errors import FileSizeError, MIMETypeError
from photo_gallery.core.utils.constants import (
    DEFAULT_UPLOAD_NAME,
    MAX_FILE_SIZE,
    MESSAGE_INVALID_TYPE,
    PHOTO_URL_PREFIX,
    get_max_file_size_mb,
)
from photo_gallery.core.utils.mime import is_allowed_mime_type

# Same unreserved set as JavaScript's encodeURIComponent
URL_SAFE_CHARACTERS = "-_.!~*'()"


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "upload" in msg_lower or "file" in msg_lower:
            msg = "Expected a file upload"
        elif "type" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_mime_type(mime_type: str | None) -> str:
    """Ensure a declared MIME type is one of the accepted image types."""
    if not is_allowed_mime_type(mime_type):
        raise MIMETypeError(
            message=MESSAGE_INVALID_TYPE,
            details={"mime_type": mime_type},
        )
    return str(mime_type).split(";", 1)[0].strip().lower()


def validate_file_size(size: int, *, max_size: int = MAX_FILE_SIZE) -> int:
    """Ensure a payload does not exceed the configured upload limit."""
    if size > max_size:
        raise FileSizeError(
            message=f"File too large. Maximum size is {get_max_file_size_mb(max_size)}MB.",
            details={"max_size": max_size},
        )
    return size


def sanitize_filename(filename: str | None) -> str:
    """Reduce a client-supplied filename to its final path component."""
    if not filename:
        return DEFAULT_UPLOAD_NAME

    # Browsers on Windows may send full paths
    name = PureWindowsPath(PurePosixPath(filename).name).name.strip()
    return name or DEFAULT_UPLOAD_NAME


def build_photo_url(name: str) -> str:
    """Relative URL under which a stored photo can be fetched."""
    return PHOTO_URL_PREFIX + quote(name, safe=URL_SAFE_CHARACTERS)
