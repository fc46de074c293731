"""Photo Gallery Service Package."""

__version__ = "1.0.0"
__description__ = (
    "HTTP photo gallery backed by an S3-compatible bucket (MinIO, AWS S3)"
)

__all__ = ["handlers", "core"]
