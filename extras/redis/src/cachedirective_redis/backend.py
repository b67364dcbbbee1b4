"""Redis cache backend implementation."""

from datetime import timedelta
from typing import Optional

import redis.asyncio as redis


class RedisCacheBackend:
    """Redis cache backend for distributed deployments.

    Lets every process that shares the Redis instance coordinate on the
    same processing markers. Supports atomic claims through ``SET NX``.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "cachedirective",
        default_ttl: Optional[int] = 300,
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Namespace prepended to every cache key.
            default_ttl: TTL in seconds for values stored without one.
            client: Existing client to use instead of connecting to redis_url.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> Optional[bytes]:
        """Retrieve cached value by key.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        return await self._redis.get(self._prefixed_key(key))

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store value with optional TTL."""
        seconds = self._ttl_seconds(ttl)
        if seconds is None:
            await self._redis.set(self._prefixed_key(key), value)
        else:
            await self._redis.set(self._prefixed_key(key), value, ex=seconds)

    async def add(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> bool:
        """Store value only if key is absent, using ``SET NX``.

        Returns:
            True if the value was stored, False if the key existed.
        """
        seconds = self._ttl_seconds(ttl)
        result = await self._redis.set(
            self._prefixed_key(key), value, ex=seconds, nx=True
        )
        return bool(result)

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache."""
        result = await self._redis.exists(self._prefixed_key(key))
        return result > 0

    def _ttl_seconds(self, ttl: Optional[timedelta]) -> Optional[int]:
        if ttl is None:
            return self._default_ttl
        # Redis rejects an expiry of zero seconds
        return max(1, int(ttl.total_seconds()))

    def _prefixed_key(self, key: str) -> str:
        if not self._key_prefix:
            return key
        return f"{self._key_prefix}:{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
