"""In-memory cache of generated replies."""

import math
import time
from typing import Callable, Optional

from cachetools import TTLCache

import constants
from log import get_logger
from models.cache_entry import CacheEntry

logger = get_logger("cache.reply_cache")

Clock = Callable[[], float]


def normalize_key(text: str) -> str:
    """Return the cache key for the user utterance."""
    return text.strip().casefold()


class ReplyCache:
    """Content-addressed cache of generated replies.

    Entries expire lazily: an entry older than ``ttl`` seconds is never
    served and is treated as absent. Entries are not dropped otherwise,
    unless ``max_entries`` is set; the least recently used entry is evicted
    when that bound is reached.

    The clock is injectable so expiry can be simulated in tests.
    """

    def __init__(
        self,
        ttl: float = constants.DEFAULT_REPLY_CACHE_TTL,
        max_entries: Optional[int] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Create a new instance of reply cache."""
        self.ttl = ttl
        self.max_entries = max_entries
        self.clock = clock
        maxsize = math.inf if max_entries is None else max_entries
        self._entries: TTLCache[str, CacheEntry] = TTLCache(
            maxsize=maxsize, ttl=ttl, timer=clock
        )

    def entry(self, key: str) -> Optional[CacheEntry]:
        """Return the cache entry stored under the key, or None if absent or expired."""
        return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        """Store the reply under the key, replacing any previous entry."""
        self._entries[key] = CacheEntry(key=key, value=value, created_at=self.clock())
        logger.debug("Cached reply for key of length %d", len(key))

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return number of entries that have not expired yet."""
        self._entries.expire()
        return len(self._entries)
