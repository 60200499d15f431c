"""Time-bounded cache of listing views."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from s3_explorer.core import get_logger, settings
from s3_explorer.objectstorage.listing.models import ListingKey, ListingView

logger = get_logger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    view: ListingView
    stored_at: float


class ListingCache:
    """Maps a :class:`ListingKey` to the last view built for it.

    An entry is served only while ``now - stored_at < ttl_seconds``; expiry is
    checked on every read, so sweeping with :meth:`purge_expired` is optional.
    Concurrent writes to the same key resolve last-put-wins.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = settings.cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._entries: dict[ListingKey, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: ListingKey) -> Optional[ListingView]:
        """Return the cached view, or ``None`` when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_seconds:
            logger.debug("Cache entry expired", bucket=key.bucket, prefix=key.prefix)
            return None
        return entry.view

    def put(self, key: ListingKey, view: ListingView) -> None:
        entry = CacheEntry(view=view, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def invalidate(self, key: ListingKey) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def purge_expired(self) -> int:
        """Drop expired entries and return how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.stored_at >= self.ttl_seconds
            ]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Purged expired cache entries", count=len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
