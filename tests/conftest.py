"""
Pytest configuration and fixtures for photo-gallery tests.
Provides AWS mocking and S3 fixtures with proper cleanup.
"""

import base64
import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient
from moto import mock_aws

from photo_gallery.config import Settings
from photo_gallery.main import create_app

# moto only intercepts the default AWS endpoint, so no custom endpoint here
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("BUCKET_NAME", "test-photo-bucket")
for _var in ("STORAGE_ENDPOINT_URL", "MINIO_ENDPOINT"):
    os.environ.pop(_var, None)


@pytest.fixture
def bucket_name() -> str:
    return os.environ["BUCKET_NAME"]


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket efficiently."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(
                    Bucket=bucket_name, Delete={"Objects": delete_keys}
                )
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client, bucket_name):
    """
    Create and manage S3 bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client

    _cleanup_s3_objects(s3_client, bucket_name)


@pytest.fixture
def s3_put_object(s3_bucket, bucket_name) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        s3_put_object("1700000000000-cat.jpg", image_bytes, "image/jpeg")
    """

    def _put(key: str, body: bytes, content_type: str | None = None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"Bucket": bucket_name, "Key": key, "Body": body}
        if content_type:
            kwargs["ContentType"] = content_type
        response: dict[str, Any] = s3_bucket.put_object(**kwargs)
        return response

    return _put


@pytest.fixture
def s3_get_object(s3_bucket, bucket_name) -> Callable[[str], dict[str, Any]]:
    """
    Helper to read an object back as ``{"body": bytes, "content_type": str}``.
    """

    def _get(key: str) -> dict[str, Any]:
        response = s3_bucket.get_object(Bucket=bucket_name, Key=key)
        return {
            "body": response["Body"].read(),
            "content_type": response.get("ContentType"),
        }

    return _get


@pytest.fixture
def s3_list_keys(s3_bucket, bucket_name) -> Callable[[], list[str]]:
    def _list() -> list[str]:
        response = s3_bucket.list_objects_v2(Bucket=bucket_name)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


TEST_MAX_UPLOAD_SIZE = 1024


@pytest.fixture
def static_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html><body>gallery</body></html>")
    (public / "app.js").write_text("console.log('gallery');")
    return public


@pytest.fixture
def app_settings(static_dir, bucket_name) -> Settings:
    return Settings(
        _env_file=None,
        storage_endpoint_url=None,
        storage_access_key=None,
        storage_secret_key=None,
        bucket_name=bucket_name,
        static_dir=str(static_dir),
        max_upload_size=TEST_MAX_UPLOAD_SIZE,
        log_level="DEBUG",
    )


@pytest.fixture
def s3_app_client(app_settings, aws_mock):
    """App wired to a real S3PhotoStorage on top of moto."""
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
