# 📄 File: sportclub/shared/infrastructure/cache/memory_cache.py
# 🧭 Purpose (Layman Explanation):
# Remembers answers for a few minutes so we do not ask the database the same question over and
# over, and forgets them the moment the underlying data changes.
#
# 🧪 Purpose (Technical Summary):
# Thread-safe in-memory cache with per-entry TTL, LRU eviction, explicit invalidation and
# hit/miss statistics. One process-wide instance backs the sport catalog listing.
#
# 🔗 Dependencies:
# - threading, time, collections.OrderedDict
# - sportclub.shared.config.settings (CACHE_SPORTS_TTL, CACHE_MAX_ENTRIES)
#
# 🔄 Connected Modules / Calls From:
# - sportclub.modules.sports.domain.services.sport_service
# - tests (cache reset between tests)

import logging
import time
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Dict, Optional

from sportclub.shared.config.settings import get_settings

logger = logging.getLogger(__name__)


class CacheEntry:
    """A cached value with expiration timestamp."""

    def __init__(self, value: Any, expires_at: float):
        self.value = value
        self.expires_at = expires_at


class InMemoryCache:
    """
    In-memory cache with TTL support and LRU eviction.

    Usage:
        cache = InMemoryCache(default_ttl=300)
        cache.set("sports:all", sports)
        sports = cache.get("sports:all")
        cache.invalidate("sports:all")
    """

    def __init__(
        self,
        default_ttl: float = 300,
        max_size: int = 1000,
        clock: Callable[[], float] = time.monotonic
    ):
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = Lock()
        self._default_ttl = default_ttl
        self._max_size = max_size
        self._clock = clock
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "invalidations": 0,
            "evictions": 0,
        }

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.
        Returns None if the key doesn't exist or is expired.
        """
        with self._lock:
            entry = self._cache.get(key)

            if entry is None:
                self._stats["misses"] += 1
                return None

            if self._clock() >= entry.expires_at:
                del self._cache[key]
                self._stats["misses"] += 1
                return None

            self._cache.move_to_end(key, last=True)
            self._stats["hits"] += 1
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """
        Set a value with a TTL, evicting the least recently used entry when full.

        Args:
            key: Cache key
            value: Value to cache
            ttl_seconds: Time to live, defaults to the cache's default TTL
        """
        ttl = self._default_ttl if ttl_seconds is None else ttl_seconds

        with self._lock:
            if len(self._cache) >= self._max_size and key not in self._cache:
                evicted_key, _ = self._cache.popitem(last=False)
                self._stats["evictions"] += 1
                logger.debug(f"Cache evicted {evicted_key}")

            self._cache[key] = CacheEntry(value, self._clock() + ttl)
            self._cache.move_to_end(key, last=True)
            self._stats["sets"] += 1

    def invalidate(self, key: str) -> bool:
        """Drop one key. Returns True if it was cached."""
        with self._lock:
            removed = self._cache.pop(key, None) is not None
            if removed:
                self._stats["invalidations"] += 1
            return removed

    def invalidate_prefix(self, prefix: str) -> int:
        """Drop every key starting with ``prefix``."""
        with self._lock:
            keys = [key for key in self._cache if key.startswith(prefix)]
            for key in keys:
                del self._cache[key]
            self._stats["invalidations"] += len(keys)
            return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def cleanup_expired(self) -> int:
        """Remove expired entries and return how many were dropped."""
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._cache.items() if now >= entry.expires_at]
            for key in expired:
                del self._cache[key]
            return len(expired)

    def get_stats(self) -> Dict[str, Any]:
        """Hit/miss counters plus current size and hit rate."""
        with self._lock:
            lookups = self._stats["hits"] + self._stats["misses"]
            return {
                **self._stats,
                "size": len(self._cache),
                "max_size": self._max_size,
                "hit_rate": round(self._stats["hits"] / lookups, 4) if lookups else 0.0,
            }

    def __len__(self) -> int:
        return len(self._cache)


# Global sports cache instance
_sports_cache: Optional[InMemoryCache] = None


def get_sports_cache() -> InMemoryCache:
    """Get the process-wide cache used by the sport catalog."""
    global _sports_cache
    if _sports_cache is None:
        settings = get_settings()
        _sports_cache = InMemoryCache(
            default_ttl=settings.CACHE_SPORTS_TTL,
            max_size=settings.CACHE_MAX_ENTRIES
        )
        logger.info(f"Sports cache initialized (ttl={settings.CACHE_SPORTS_TTL}s)")
    return _sports_cache


def reset_sports_cache() -> None:
    """Drop the global sports cache; the next access builds a fresh one."""
    global _sports_cache
    _sports_cache = None
