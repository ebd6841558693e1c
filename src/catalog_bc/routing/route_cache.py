"""Cache-aside layer for route searches.

Key:   "<prefix>:<origin_id>:<destination_id>:<YYYY-MM-DD>"
Value: {"generation": n, "data": <formatted itinerary list>}, JSON encoded
TTL:   1 hour by default

Any catalog mutation (location or transportation create/update/delete)
drops every cached search; there is no fine-grained dependency tracking.
Invalidation also bumps a generation counter stored under
"<prefix>-generation". Entries are stamped with the generation read before
the search ran, and entries from an older generation are treated as misses,
so a search that overlaps a mutation never serves its result afterwards.

Backends are picked from the URL, the same way the rate limiter picks its
storage: "memory://" for a single process, "redis://..." when several
workers must share the cache.
"""

import json
import logging
import threading
import time
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple
from uuid import UUID

import redis

from core.config import settings

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """Minimal key/value store with per-entry TTL and integer counters."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with prefix; returns the number removed."""
        pass

    @abstractmethod
    def counter(self, key: str) -> int:
        """Current value of a counter, 0 if it was never incremented."""
        pass

    @abstractmethod
    def incr(self, key: str) -> int:
        """Atomically increment a counter; returns the new value."""
        pass


class InMemoryCacheBackend(CacheBackend):
    """Process-local backend. Thread-safe for FastAPI's sync worker threads."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._counters: Dict[str, int] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, value)

    def delete_prefix(self, prefix: str) -> int:
        with self._lock:
            keys = [k for k in self._entries if k.startswith(prefix)]
            for k in keys:
                del self._entries[k]
            return len(keys)

    def counter(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def incr(self, key: str) -> int:
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + 1
            return self._counters[key]


class RedisCacheBackend(CacheBackend):
    """Redis backend (redis-py, sync client)."""

    def __init__(self, client: "redis.Redis"):
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCacheBackend":
        return cls(redis.Redis.from_url(url, encoding="utf-8", decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        return self._redis.get(key)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._redis.set(key, value, ex=ttl_seconds)

    def delete_prefix(self, prefix: str) -> int:
        removed = 0
        for key in self._redis.scan_iter(match=f"{prefix}*", count=500):
            removed += self._redis.delete(key)
        return removed

    def counter(self, key: str) -> int:
        value = self._redis.get(key)
        return int(value) if value is not None else 0

    def incr(self, key: str) -> int:
        return self._redis.incr(key)


def backend_from_url(url: str) -> CacheBackend:
    if url.startswith("memory://"):
        return InMemoryCacheBackend()
    if url.startswith(("redis://", "rediss://", "unix://")):
        return RedisCacheBackend.from_url(url)
    raise ValueError(f"Unsupported route cache URL: {url}")


class RouteCache:
    """Cache-aside store for formatted route search results."""

    def __init__(self, backend: CacheBackend, ttl_seconds: int = 3600, prefix: str = "routes"):
        self.backend = backend
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix

    @property
    def generation_key(self) -> str:
        # Outside "<prefix>:" so invalidate_all never deletes it
        return f"{self.prefix}-generation"

    def key(self, origin_id: UUID, destination_id: UUID, travel_date: date) -> str:
        return f"{self.prefix}:{origin_id}:{destination_id}:{travel_date.isoformat()}"

    def generation(self) -> int:
        return self.backend.counter(self.generation_key)

    def get(self, origin_id: UUID, destination_id: UUID, travel_date: date) -> Optional[Any]:
        raw = self.backend.get(self.key(origin_id, destination_id, travel_date))
        if raw is None:
            return None
        entry = json.loads(raw)
        if entry.get("generation") != self.generation():
            return None
        return entry["data"]

    def set(
        self,
        origin_id: UUID,
        destination_id: UUID,
        travel_date: date,
        value: Any,
        generation: Optional[int] = None,
    ) -> None:
        if generation is None:
            generation = self.generation()
        self.backend.set(
            self.key(origin_id, destination_id, travel_date),
            json.dumps({"generation": generation, "data": value}, default=str),
            self.ttl_seconds,
        )

    def get_or_compute(
        self,
        origin_id: UUID,
        destination_id: UUID,
        travel_date: date,
        compute: Callable[[], Any],
    ) -> Any:
        """Return the cached value or compute, store and return it.

        The result is stored only if no invalidation happened while it was
        computed. Concurrent misses for the same key may compute in parallel;
        the last write wins and every writer stores an equivalent value.
        """
        cached = self.get(origin_id, destination_id, travel_date)
        if cached is not None:
            logger.debug(f"Route cache hit {self.key(origin_id, destination_id, travel_date)}")
            return cached
        generation = self.generation()
        value = compute()
        if self.generation() == generation:
            self.set(origin_id, destination_id, travel_date, value, generation=generation)
        else:
            logger.debug("Catalog changed during route search, result not cached")
        return value

    def invalidate_all(self) -> int:
        self.backend.incr(self.generation_key)
        removed = self.backend.delete_prefix(f"{self.prefix}:")
        logger.info(f"Route cache invalidated ({removed} entries)")
        return removed


def build_route_cache() -> RouteCache:
    return RouteCache(
        backend=backend_from_url(settings.cache.ROUTE_CACHE_URL),
        ttl_seconds=settings.cache.ROUTE_CACHE_TTL_SECONDS,
        prefix=settings.cache.ROUTE_CACHE_PREFIX,
    )


# Global route cache instance, shared by every request
route_cache = build_route_cache()
