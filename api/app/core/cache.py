"""
Key/value cache backends used by the export service.

Two interchangeable backends share the CacheBackend interface:
- DiskCache: local diskcache store, shared by the workers of one host. Default for local runs and tests.
- RedisCache: shared between workers, values stored as JSON with a server-side TTL.

The backend is chosen from settings.cache_url (disk://[path] or redis://...).
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import diskcache
import redis

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """Minimal TTL cache interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int) -> None:
        """Store a value for ttl seconds."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a single key. Missing keys are ignored."""

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Remove every key starting with prefix and return how many were removed."""

    def remember(self, key: str, ttl: int, factory: Callable[[], Any]) -> Any:
        """Read-through helper: return the cached value or compute, store and return it."""
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return cached

        logger.debug(f"Cache miss: {key}")
        value = factory()
        self.set(key, value, ttl)
        return value


class DiskCache(CacheBackend):
    """Local cache on top of diskcache; a temporary directory is used when none is given."""

    def __init__(self, directory: Optional[str] = None):
        self._cache = diskcache.Cache(directory)

    @property
    def directory(self) -> str:
        return self._cache.directory

    def get(self, key: str) -> Optional[Any]:
        return self._cache.get(key)

    def set(self, key: str, value: Any, ttl: int) -> None:
        self._cache.set(key, value, expire=ttl)

    def delete(self, key: str) -> None:
        self._cache.delete(key)

    def delete_prefix(self, prefix: str) -> int:
        removed = 0
        for key in list(self._cache.iterkeys()):
            if isinstance(key, str) and key.startswith(prefix) and self._cache.delete(key):
                removed += 1
        return removed

    def clear(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._cache.close()


class RedisCache(CacheBackend):
    """Redis-backed cache; values are JSON encoded."""

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[Any]:
        raw = self._client.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl: int) -> None:
        self._client.setex(key, ttl, json.dumps(value, ensure_ascii=False))

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def delete_prefix(self, prefix: str) -> int:
        keys = list(self._client.scan_iter(match=f"{prefix}*"))
        if not keys:
            return 0
        return int(self._client.delete(*keys))


def build_cache(url: str) -> CacheBackend:
    """Create a cache backend from a URL."""
    if url.startswith(("redis://", "rediss://", "unix://")):
        logger.info(f"Using Redis export cache at {url.split('@')[-1]}")
        return RedisCache.from_url(url)
    if url.startswith("disk://"):
        directory = url[len("disk://"):] or None
        cache = DiskCache(directory)
        logger.info(f"Using disk export cache at {cache.directory}")
        return cache
    raise ValueError(f"Unsupported CACHE_URL scheme: {url}")


_cache: Optional[CacheBackend] = None


def get_cache() -> CacheBackend:
    """Dependency returning the process-wide cache backend."""
    global _cache
    if _cache is None:
        from app.core.config import settings
        _cache = build_cache(settings.cache_url)
    return _cache
