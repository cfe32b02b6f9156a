"""Pluggable output storage backends behind the IFileStore protocol."""

from __future__ import annotations

from wagefile.core.config import AppSettings
from wagefile.persistence.local_backend import LocalFileStore
from wagefile.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings | None = None) -> LocalFileStore | S3FileStore:
    """Create the output file store selected by ``settings.output.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.output.backend == "s3":
        return S3FileStore(
            bucket=settings.s3.bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
            prefix=settings.s3.prefix,
        )
    return LocalFileStore(root=settings.output.directory)
