"""Value types shared by the listing pipeline.

Raw entries come straight from one ``ListObjectsV2`` page and are modelled as a
tagged union (:class:`CommonPrefix` or :class:`ObjectEntry`). The hierarchy
builder turns an aggregated sequence of them into a :class:`ListingView`,
which is what the cache stores and callers receive.

All types are frozen so a cached view can be handed out without copying.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class CommonPrefix:
    """A delimiter-collapsed prefix, e.g. ``notes/``."""

    prefix: str


@dataclass(frozen=True)
class ObjectEntry:
    """A single object returned by the provider."""

    key: str
    size: int
    last_modified: Optional[datetime] = None


RawEntry = Union[CommonPrefix, ObjectEntry]


@dataclass(frozen=True)
class ListingPage:
    """One provider listing call's result."""

    common_prefixes: tuple[str, ...] = ()
    objects: tuple[ObjectEntry, ...] = ()
    next_continuation_token: Optional[str] = None


@dataclass(frozen=True)
class FolderEntry:
    """An immediate child folder of the listed prefix."""

    name: str
    full_path: str


@dataclass(frozen=True)
class FileEntry:
    """An immediate child object of the listed prefix."""

    name: str
    full_path: str
    size: int
    last_modified: Optional[datetime] = None


@dataclass(frozen=True)
class ListingView:
    """Folders and files directly under ``prefix``, in provider order."""

    folders: tuple[FolderEntry, ...]
    files: tuple[FileEntry, ...]
    prefix: str = ""


@dataclass(frozen=True)
class ListingKey:
    """Cache identity of a listing request."""

    session_id: str
    bucket: str
    prefix: str
