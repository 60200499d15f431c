"""Object storage listing: pagination, hierarchy building and caching."""

from .cache import ListingCache
from .hierarchy import build_listing_view
from .models import (
    CommonPrefix,
    FileEntry,
    FolderEntry,
    ListingKey,
    ListingPage,
    ListingView,
    ObjectEntry,
    RawEntry,
)
from .paginator import fetch_all

__all__ = [
    "CommonPrefix",
    "FileEntry",
    "FolderEntry",
    "ListingCache",
    "ListingKey",
    "ListingPage",
    "ListingView",
    "ObjectEntry",
    "RawEntry",
    "build_listing_view",
    "fetch_all",
]
