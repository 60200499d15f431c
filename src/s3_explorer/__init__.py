"""Browse a flat S3 namespace as folders and files.

This package turns paginated, ``/``-delimited ``ListObjectsV2`` results into a
folder/file view for one prefix at a time, binds one S3 client per browser
session, and caches each listing for a few minutes so navigating back and
forth does not hit S3 again.

Key Features:
    - Per-session S3 client binding (explicit credentials or AWS profile)
    - Transparent aggregation of every listing page
    - Folder/file view relative to the requested prefix
    - TTL listing cache with forced refresh
    - CLI interface

Recommended Usage:

    >>> from s3_explorer import ListingService, S3ClientConfig
    >>> service = ListingService()
    >>> session_id = service.connect(S3ClientConfig(aws_profile="dev"))
    >>> view = service.list_objects(session_id, "docs", "notes/")
    >>> [f.name for f in view.files]
"""

__version__ = "0.1.0"

from .core.exceptions import (
    S3ExplorerError,
    SessionError,
    StorageError,
    ValidationError,
)
from .objectstorage import (
    FileEntry,
    FolderEntry,
    ListingCache,
    ListingKey,
    ListingView,
    ObjectStream,
    S3ClientConfig,
    StorageClient,
    bind_client,
    parse_s3_uri,
)
from .schemas import BrowserConfig
from .service import ListingService
from .sessions import SessionRegistry

__all__ = [
    # Orchestration
    "ListingService",
    "SessionRegistry",
    "ListingCache",
    "BrowserConfig",
    # Listing values
    "FileEntry",
    "FolderEntry",
    "ListingKey",
    "ListingView",
    # Client binding
    "ObjectStream",
    "S3ClientConfig",
    "StorageClient",
    "bind_client",
    "parse_s3_uri",
    # Errors
    "S3ExplorerError",
    "SessionError",
    "StorageError",
    "ValidationError",
]
