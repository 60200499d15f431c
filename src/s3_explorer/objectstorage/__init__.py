"""Object storage operations for S3-compatible services."""

from .clients import (
    CLI_SESSION_ID,
    ObjectStream,
    S3ClientConfig,
    S3StorageClient,
    StorageClient,
    bind_client,
    parse_s3_uri,
)
from .listing import (
    FileEntry,
    FolderEntry,
    ListingCache,
    ListingKey,
    ListingView,
    build_listing_view,
    fetch_all,
)

__all__ = [
    "CLI_SESSION_ID",
    "FileEntry",
    "FolderEntry",
    "ListingCache",
    "ListingKey",
    "ListingView",
    "ObjectStream",
    "S3ClientConfig",
    "S3StorageClient",
    "StorageClient",
    "bind_client",
    "build_listing_view",
    "fetch_all",
    "parse_s3_uri",
]
