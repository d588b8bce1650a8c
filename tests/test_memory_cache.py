"""
In-process TTL/LRU cache.
"""

from sportclub.shared.infrastructure.cache.memory_cache import InMemoryCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCache:

    def test_get_returns_cached_value(self):
        cache = InMemoryCache(default_ttl=60)
        cache.set("sports:all", ["tennis"])

        assert cache.get("sports:all") == ["tennis"]
        assert cache.get("missing") is None

    def test_entries_expire_after_ttl(self):
        clock = FakeClock()
        cache = InMemoryCache(default_ttl=10, clock=clock)
        cache.set("key", "value")

        clock.now = 9.9
        assert cache.get("key") == "value"

        clock.now = 10.0
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_per_key_ttl_overrides_default(self):
        clock = FakeClock()
        cache = InMemoryCache(default_ttl=100, clock=clock)
        cache.set("short", 1, ttl_seconds=1)

        clock.now = 2
        assert cache.get("short") is None

    def test_least_recently_used_is_evicted(self):
        cache = InMemoryCache(default_ttl=60, max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None
        assert cache.get("c") == 3
        assert cache.get_stats()["evictions"] == 1

    def test_invalidate(self):
        cache = InMemoryCache()
        cache.set("sports:all", [])

        assert cache.invalidate("sports:all") is True
        assert cache.invalidate("sports:all") is False
        assert cache.get("sports:all") is None

    def test_invalidate_prefix(self):
        cache = InMemoryCache()
        cache.set("sports:all", [])
        cache.set("sports:1", {})
        cache.set("members:1", {})

        assert cache.invalidate_prefix("sports:") == 2
        assert cache.get("members:1") == {}

    def test_cleanup_expired(self):
        clock = FakeClock()
        cache = InMemoryCache(default_ttl=5, clock=clock)
        cache.set("old", 1)
        clock.now = 3
        cache.set("new", 2)

        clock.now = 6
        assert cache.cleanup_expired() == 1
        assert len(cache) == 1

    def test_stats(self):
        cache = InMemoryCache()
        cache.set("k", "v")
        cache.get("k")
        cache.get("nope")

        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["size"] == 1
        assert stats["hit_rate"] == 0.5
