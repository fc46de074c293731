"""
Application configuration using Pydantic Settings.
All environment variables are loaded here with sensible defaults.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from photo_gallery.core.utils.constants import (
    DEFAULT_BUCKET_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REGION,
    DEFAULT_STATIC_DIR,
    MAX_FILE_SIZE,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # S3-compatible object storage (MinIO, AWS S3, LocalStack)
    # Unset endpoint/keys fall back to the AWS defaults and credential chain
    storage_endpoint_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_ENDPOINT_URL", "MINIO_ENDPOINT"),
    )
    storage_access_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_ACCESS_KEY", "MINIO_ACCESS_KEY"),
    )
    storage_secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STORAGE_SECRET_KEY", "MINIO_SECRET_KEY"),
    )
    storage_region: str = DEFAULT_REGION
    bucket_name: str = DEFAULT_BUCKET_NAME

    # HTTP server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: str = "*"
    static_dir: str = DEFAULT_STATIC_DIR

    # Uploads
    max_upload_size: int = Field(default=MAX_FILE_SIZE, gt=0)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Settings built once per process."""
    return Settings()
