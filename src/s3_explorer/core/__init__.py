"""Core utilities and shared components for s3-explorer."""

from .config import Settings, settings
from .exceptions import S3ExplorerError, SessionError, StorageError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "Settings",
    "settings",
    "S3ExplorerError",
    "SessionError",
    "StorageError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
