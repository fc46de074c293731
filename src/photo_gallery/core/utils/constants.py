"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
defaults that are used across multiple modules.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_MISSING_FILE = "MISSING_FILE"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_PHOTO_LIST_FAILED = "PHOTO_LIST_FAILED"
ERROR_CODE_PHOTO_UPLOAD_FAILED = "PHOTO_UPLOAD_FAILED"
ERROR_CODE_PHOTO_DOWNLOAD_FAILED = "PHOTO_DOWNLOAD_FAILED"
ERROR_CODE_PHOTO_DELETE_FAILED = "PHOTO_DELETE_FAILED"
ERROR_CODE_BUCKET_SETUP_FAILED = "BUCKET_SETUP_FAILED"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"

# Backend error codes that mean "object does not exist"
STORAGE_NOT_FOUND_CODES: Final[frozenset[str]] = frozenset(
    {"NoSuchKey", "NotFound", "404"}
)
STORAGE_NO_BUCKET_CODES: Final[frozenset[str]] = frozenset(
    {"NoSuchBucket", "NotFound", "404"}
)


# ============================================================================
# User-facing Messages
# ============================================================================

MESSAGE_LIST_FAILED = "Failed to list photos"
MESSAGE_PHOTO_NOT_FOUND = "Photo not found"
MESSAGE_NO_FILE = "No file uploaded"
MESSAGE_INVALID_TYPE = "Invalid file type. Only JPEG, PNG, GIF, and WebP are allowed."
MESSAGE_UPLOAD_FAILED = "Failed to upload photo"
MESSAGE_UPLOAD_SUCCEEDED = "Photo uploaded successfully"
MESSAGE_DELETE_FAILED = "Failed to delete photo"
MESSAGE_DELETE_SUCCEEDED = "Photo deleted successfully"


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB in bytes

UPLOAD_FIELD_NAME = "photo"
DEFAULT_UPLOAD_NAME = "photo"

MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
}

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(MIME_TYPE_EXTENSION_MAP.keys())

ALLOWED_EXTENSIONS: Final[frozenset[str]] = frozenset(
    ext for extensions in MIME_TYPE_EXTENSION_MAP.values() for ext in extensions
)

DEFAULT_PHOTO_CONTENT_TYPE = "image/jpeg"


# ============================================================================
# HTTP
# ============================================================================

API_PREFIX = "/api"
PHOTOS_PATH = "/photos"
PHOTO_URL_PREFIX = f"{API_PREFIX}{PHOTOS_PATH}/"
PHOTO_CACHE_CONTROL = "public, max-age=31536000"
STREAM_CHUNK_SIZE = 64 * 1024
REQUEST_ID_HEADER = "X-Request-ID"
INDEX_DOCUMENT = "index.html"


# ============================================================================
# Configuration Defaults
# ============================================================================

SERVICE_NAME = "photo-gallery"
DEFAULT_BUCKET_NAME = "photogallery-storage"
DEFAULT_REGION = "us-east-1"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
DEFAULT_STATIC_DIR = "public"


# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb(max_size: int = MAX_FILE_SIZE) -> int:
    """Get maximum file size in megabytes."""
    return max_size // (1024 * 1024)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
