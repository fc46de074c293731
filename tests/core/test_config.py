import pytest
from pydantic import ValidationError

from photo_gallery.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "STORAGE_ENDPOINT_URL",
        "MINIO_ENDPOINT",
        "STORAGE_ACCESS_KEY",
        "MINIO_ACCESS_KEY",
        "STORAGE_SECRET_KEY",
        "MINIO_SECRET_KEY",
        "BUCKET_NAME",
        "HOST",
        "PORT",
        "STATIC_DIR",
        "CORS_ORIGINS",
        "MAX_UPLOAD_SIZE",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env) -> None:
        settings = Settings(_env_file=None)

        assert settings.bucket_name == "photogallery-storage"
        assert settings.port == 3001
        assert settings.host == "0.0.0.0"
        assert settings.storage_endpoint_url is None
        assert settings.max_upload_size == 50 * 1024 * 1024
        assert settings.static_dir == "public"
        assert settings.cors_origin_list == ["*"]

    def test_minio_variable_names(self, clean_env) -> None:
        clean_env.setenv("MINIO_ENDPOINT", "http://minio:9000")
        clean_env.setenv("MINIO_ACCESS_KEY", "minioadmin")
        clean_env.setenv("MINIO_SECRET_KEY", "minioadmin-secret")

        settings = Settings(_env_file=None)

        assert settings.storage_endpoint_url == "http://minio:9000"
        assert settings.storage_access_key == "minioadmin"
        assert settings.storage_secret_key == "minioadmin-secret"

    def test_storage_variable_names(self, clean_env) -> None:
        clean_env.setenv("STORAGE_ENDPOINT_URL", "http://localhost:9000")
        clean_env.setenv("BUCKET_NAME", "my-photos")
        clean_env.setenv("PORT", "8080")

        settings = Settings(_env_file=None)

        assert settings.storage_endpoint_url == "http://localhost:9000"
        assert settings.bucket_name == "my-photos"
        assert settings.port == 8080

    def test_cors_origin_list(self, clean_env) -> None:
        clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

        assert Settings(_env_file=None).cors_origin_list == ["http://a.test", "http://b.test"]

    def test_max_upload_size_must_be_positive(self, clean_env) -> None:
        clean_env.setenv("MAX_UPLOAD_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
