"""Folder/file materialization from delimiter-grouped listing entries."""

from collections.abc import Iterable

from s3_explorer.objectstorage.listing.models import (
    CommonPrefix,
    FileEntry,
    FolderEntry,
    ListingView,
    ObjectEntry,
    RawEntry,
)


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix):] if path.startswith(prefix) else path


def build_listing_view(entries: Iterable[RawEntry], prefix: str) -> ListingView:
    """Partition raw entries into the immediate folders and files of ``prefix``.

    Names are the full path with ``prefix`` removed as a literal string; no
    other normalization is applied. An object whose key equals ``prefix`` is
    the folder's own marker and is left out. Entries that do not start with
    ``prefix`` are dropped as well, so every ``full_path`` in the result starts
    with it. Order follows the input; nothing is sorted here.
    """
    folders: list[FolderEntry] = []
    files: list[FileEntry] = []

    for entry in entries:
        match entry:
            case CommonPrefix(prefix=path):
                if path.startswith(prefix):
                    folders.append(FolderEntry(name=_strip_prefix(path, prefix), full_path=path))
            case ObjectEntry(key=key, size=size, last_modified=last_modified):
                if key == prefix or not key.startswith(prefix):
                    continue
                files.append(
                    FileEntry(
                        name=_strip_prefix(key, prefix),
                        full_path=key,
                        size=size,
                        last_modified=last_modified,
                    )
                )
            case _:
                raise TypeError(f"Unsupported listing entry: {entry!r}")

    return ListingView(folders=tuple(folders), files=tuple(files), prefix=prefix)
