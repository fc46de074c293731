"""Thin adapter for interacting with an S3-compatible object store."""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol

import boto3
from botocore.config import Config

from photo_gallery.config import Settings


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (backend-facing only)."""

    def head_bucket(self, *, Bucket: str) -> Any: ...

    def create_bucket(self, *, Bucket: str, **kwargs: Any) -> Any: ...

    def get_paginator(self, operation_name: str) -> Any: ...

    def head_object(self, *, Bucket: str, Key: str) -> Mapping[str, Any]: ...

    def get_object(self, *, Bucket: str, Key: str) -> Mapping[str, Any]: ...

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
        ContentLength: int,
    ) -> Any: ...

    def delete_object(self, *, Bucket: str, Key: str) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    @property
    def bucket(self) -> str: ...

    def head_bucket(self) -> None: ...

    def create_bucket(self) -> None: ...

    def iter_objects(self, *, prefix: str = "") -> Iterator[Mapping[str, Any]]: ...

    def head_object(self, *, key: str) -> Mapping[str, Any]: ...

    def get_object(self, *, key: str) -> Mapping[str, Any]: ...

    def put_object(self, *, key: str, body: bytes, content_type: str) -> None: ...

    def delete_object(self, *, key: str) -> None: ...


def build_s3_client(settings: Settings) -> _Boto3S3Client:
    """Create a boto3 S3 client from application settings.

    Signature v4 and path-style addressing keep MinIO and other
    S3-compatible servers working alongside AWS.
    """
    return boto3.client(
        "s3",
        endpoint_url=settings.storage_endpoint_url,
        aws_access_key_id=settings.storage_access_key,
        aws_secret_access_key=settings.storage_secret_key,
        region_name=settings.storage_region,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"},
        ),
    )


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps a boto3 S3 client bound to a single bucket
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, settings: Settings, client: _Boto3S3Client | None = None) -> None:
        """Bind the adapter to the configured bucket."""
        if not settings.bucket_name:
            raise RuntimeError("BUCKET_NAME must not be empty")

        self._bucket = settings.bucket_name
        self._region = settings.storage_region
        self._client: _Boto3S3Client = client or build_s3_client(settings)

    @property
    def bucket(self) -> str:
        return self._bucket

    def head_bucket(self) -> None:
        """Raises botocore ClientError if the bucket is missing or inaccessible."""
        self._client.head_bucket(Bucket=self._bucket)

    def create_bucket(self) -> None:
        kwargs: dict[str, Any] = {}
        # us-east-1 rejects an explicit location constraint
        if self._region and self._region != "us-east-1":
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": self._region}

        self._client.create_bucket(Bucket=self._bucket, **kwargs)

    def iter_objects(self, *, prefix: str = "") -> Iterator[Mapping[str, Any]]:
        """Yield every object entry in the bucket, following continuation pages."""
        paginator = self._client.get_paginator("list_objects_v2")

        for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
            yield from page.get("Contents", [])

    def head_object(self, *, key: str) -> Mapping[str, Any]:
        return self._client.head_object(Bucket=self._bucket, Key=key)

    def get_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        return self._client.get_object(Bucket=self._bucket, Key=key)

    def put_object(self, *, key: str, body: bytes, content_type: str) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            ContentLength=len(body),
        )

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(Bucket=self._bucket, Key=key)
