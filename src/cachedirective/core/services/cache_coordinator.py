"""Cache coordinator - read-through/write-through state machine for one key."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from cachedirective.core.entities.cache_config import CacheConfig
from cachedirective.core.entities.cache_entry import CacheEntry
from cachedirective.core.entities.field_cache_config import FieldCacheConfig
from cachedirective.core.interfaces.cache_backend import (
    IAtomicCacheBackend,
    ICacheBackend,
)
from cachedirective.core.interfaces.serializer import ISerializer
from cachedirective.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)

Resolver = Callable[[], Any]


class CacheCoordinator:
    """Decides between serving from cache and calling the resolver.

    All coordination goes through the backend; the coordinator holds no
    locks and no per-key state, so any number of processes sharing a
    backend coordinate with each other.

    SHARED entries move through three states as seen by a reader:

    - ABSENT: nothing stored. The reader writes a processing marker,
      calls the resolver and stores a completed marker.
    - PROCESSING: another caller is resolving. The reader sleeps
      ``ping_interval`` ms and reads again, for at most ``max_polls``
      rounds, after which it treats the key as ABSENT.
    - COMPLETED: the stored value is returned.

    SCOPED entries hold the raw value and have no processing state;
    every caller that misses calls the resolver.

    A resolver failure propagates unchanged. Nothing is written after a
    failure and a processing marker is left to expire on its own.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        serializer: ISerializer | None = None,
        config: CacheConfig | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize the coordinator.

        Args:
            backend: The store shared by all callers.
            serializer: Encoder for markers and values. Defaults to JSON.
            config: Schema-level cache configuration.
            sleep: Coroutine used to wait between polls, in seconds.
        """
        self._backend = backend
        self._serializer = serializer or JsonSerializer()
        self._config = config or CacheConfig()
        self._sleep = sleep

        # Statistics
        self._hits = 0
        self._misses = 0
        self._waits = 0

    @property
    def backend(self) -> ICacheBackend:
        return self._backend

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, poll waits and total resolutions.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "waits": self._waits,
            "total": self._hits + self._misses,
        }

    async def resolve(
        self,
        key: str,
        field_config: FieldCacheConfig,
        resolver: Resolver,
    ) -> Any:
        """Return the cached value for key, resolving it on a miss.

        Args:
            key: The compiled cache key.
            field_config: The field's cache configuration.
            resolver: Zero-argument callable producing the value. May
                return an awaitable.

        Returns:
            The cached or freshly resolved value.
        """
        if field_config.is_shared:
            return await self._resolve_shared(key, field_config, resolver)
        return await self._resolve_scoped(key, field_config, resolver)

    async def _resolve_scoped(
        self,
        key: str,
        field_config: FieldCacheConfig,
        resolver: Resolver,
    ) -> Any:
        data = await self._backend.get(key)
        if data is not None:
            self._hits += 1
            logger.debug("HIT %s (scoped)", key)
            return self._serializer.deserialize(data)

        self._misses += 1
        logger.debug("MISS %s (scoped)", key)

        result = await _call(resolver)
        await self._backend.set(
            key, self._serializer.serialize(result), field_config.ttl_delta
        )
        return result

    async def _resolve_shared(
        self,
        key: str,
        field_config: FieldCacheConfig,
        resolver: Resolver,
    ) -> Any:
        while True:
            entry = await self._wait_for_completion(key, field_config)
            if entry is not None:
                self._hits += 1
                logger.debug("HIT %s (shared)", key)
                return entry.value

            if await self._stake_claim(key, field_config):
                break

            logger.debug("Lost claim race for %s, waiting", key)

        self._misses += 1
        logger.debug("MISS %s (shared), resolving", key)

        result = await _call(resolver)
        await self._backend.set(
            key,
            self._serializer.serialize(CacheEntry.completed(result).to_payload()),
            field_config.ttl_delta,
        )
        return result

    async def _wait_for_completion(
        self,
        key: str,
        field_config: FieldCacheConfig,
    ) -> CacheEntry | None:
        """Poll while the key is PROCESSING.

        Returns:
            The completed entry, or None once the key is ABSENT or the
            polling budget is spent.
        """
        max_polls = field_config.max_polls

        for attempt in range(max_polls + 1):
            entry = await self._read_entry(key)
            if entry is None or entry.is_completed:
                return entry

            if attempt == max_polls:
                break

            self._waits += 1
            await self._sleep(field_config.ping_interval_seconds)

        logger.warning(
            "Processing claim on %s still present after %d polls; taking over",
            key,
            max_polls,
        )
        return None

    async def _read_entry(self, key: str) -> CacheEntry | None:
        data = await self._backend.get(key)
        if data is None:
            return None
        return CacheEntry.from_payload(self._serializer.deserialize(data))

    async def _stake_claim(self, key: str, field_config: FieldCacheConfig) -> bool:
        payload = self._serializer.serialize(CacheEntry.processing().to_payload())
        ttl = field_config.polling_timeout_delta

        if self._config.atomic_claims and isinstance(
            self._backend, IAtomicCacheBackend
        ):
            return await self._backend.add(key, payload, ttl)

        await self._backend.set(key, payload, ttl)
        return True


async def _call(resolver: Resolver) -> Any:
    result = resolver()
    if inspect.isawaitable(result):
        result = await result
    return result
