"""In-memory cache backend implementation."""

import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Item(NamedTuple):
    data: bytes
    ttl: float


class InMemoryCacheBackend:
    """In-memory cache backend with per-item TTL and LRU eviction.

    Suitable for single-process deployments. Uses cachetools' TLRUCache
    so that processing markers and completed entries each expire after
    their own TTL.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: TTL in seconds for items stored without one.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, _Item] = TLRUCache(
            maxsize=maxsize,
            ttu=self._time_to_use,
            timer=timer,
        )

    @staticmethod
    def _time_to_use(key: str, item: _Item, now: float) -> float:
        return now + item.ttl

    def _ttl_seconds(self, ttl: timedelta | None) -> float:
        if ttl is None:
            return self._default_ttl
        return ttl.total_seconds()

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        item = self._cache.get(key)
        return item.data if item is not None else None

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value, replacing any previous entry and its TTL."""
        self._cache[key] = _Item(value, self._ttl_seconds(ttl))

    async def add(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> bool:
        """Store value only if key is absent.

        The check and the write happen without an intervening await, so
        the operation is atomic with respect to other coroutines.

        Returns:
            True if the value was stored, False if the key existed.
        """
        if key in self._cache:
            return False
        self._cache[key] = _Item(value, self._ttl_seconds(ttl))
        return True

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache and has not expired."""
        return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
