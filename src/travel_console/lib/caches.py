"""
Disk-based caching utilities with TTL support.

Provides a DiskCache class that stores cached values on disk with
automatic expiration. Uses the diskcache library for reliable,
thread-safe storage shared by every Dash worker process.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar

import diskcache

T = TypeVar("T")


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
        hit: True when the value came from the cache rather than the loader.
    """

    value: Any
    hit: bool = True


class DiskCache:
    """
    Disk-based cache with TTL support and tag based invalidation.

    Every entry is stored with a tag (the resource key for repositories), so
    a whole resource can be evicted without touching its neighbours.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: str,
        loader: Callable[[], T],
        expire: int | None = None,
        tag: str | None = None,
    ) -> CacheEntry:
        """
        Get a value from cache or load it using the provided function.

        If the key exists in cache and hasn't expired, returns the cached
        value. Otherwise, calls the loader function, stores the result,
        and returns it.

        Args:
            key: Cache key string.
            loader: Function to call if cache miss (no arguments).
            expire: TTL in seconds. None means no expiration.
            tag: Optional tag used by evict().

        Returns:
            CacheEntry containing the value.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)

        value = loader()
        self._cache.set(key, value, expire=expire, tag=tag)
        return CacheEntry(value=value, hit=False)

    def get(self, key: str) -> CacheEntry | None:
        """Return the cached entry for key, or None on a miss."""
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)
        return None

    def set(
        self, key: str, value: Any, expire: int | None = None, tag: str | None = None
    ) -> None:
        """
        Store a value in cache.

        Args:
            key: Cache key string.
            value: Value to store.
            expire: TTL in seconds. None means no expiration.
            tag: Optional tag used by evict().
        """
        self._cache.set(key, value, expire=expire, tag=tag)

    def delete(self, key: str) -> None:
        """Delete a key from cache."""
        self._cache.delete(key)

    def evict(self, tag: str) -> int:
        """
        Remove every entry stored with the given tag.

        Returns:
            Number of entries removed.
        """
        return self._cache.evict(tag)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
