"""S3 file storage backend implementing IFileStore."""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from wagefile.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class S3FileStore:
    """IFileStore backed by an S3 bucket, keys optionally under a prefix."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None, prefix: str = "") -> None:
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._prefix = prefix.strip("/")
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _key(self, path: str) -> str:
        path = path.lstrip("/")
        return f"{self._prefix}/{path}" if self._prefix else path

    def read(self, path: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=self._key(path))
            return resp["Body"].read()
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"S3 read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        key = self._key(path)
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=key, Body=data, ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"S3 write failed for {path!r}: {exc}") from exc
        logger.debug("Wrote %d bytes to s3://%s/%s", len(data), self._bucket, key)
        return f"s3://{self._bucket}/{key}"
