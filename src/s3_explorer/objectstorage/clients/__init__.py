"""S3 client binding and the storage capability it provides."""

from .s3_client import (
    CLI_SESSION_ID,
    ObjectStream,
    S3ClientConfig,
    S3StorageClient,
    StorageClient,
    bind_client,
    parse_s3_uri,
)

__all__ = [
    "CLI_SESSION_ID",
    "ObjectStream",
    "S3ClientConfig",
    "S3StorageClient",
    "StorageClient",
    "bind_client",
    "parse_s3_uri",
]
