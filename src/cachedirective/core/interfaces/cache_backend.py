"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol, runtime_checkable


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    The coordinator only needs reads and writes with a TTL. Entries are
    never deleted explicitly; they disappear when their TTL lapses.
    Methods are async to support both in-memory and distributed stores.
    """

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses backend default.
        """
        ...


@runtime_checkable
class IAtomicCacheBackend(ICacheBackend, Protocol):
    """Backend that can store a value only if the key is absent."""

    async def add(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> bool:
        """Store value unless the key already exists.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses backend default.

        Returns:
            True if the value was stored, False if the key existed.
        """
        ...
