"""Per-field cache configuration entity.

Mirrors the arguments of the ``@cache`` schema directive::

    directive @cache(
        ttl: Int
        cacheKey: [String!]
        type: CacheType
        pollingTimeout: Int
        pingInterval: Int
    ) on FIELD_DEFINITION
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

DEFAULT_TTL = 900
DEFAULT_CACHE_KEY: tuple[str, ...] = ("parent", "args", "vars")
DEFAULT_POLLING_TIMEOUT = 30
DEFAULT_PING_INTERVAL = 1000


class CacheType(Enum):
    """Coordination policy for concurrent resolutions of the same key.

    SHARED: Callers coordinate through a processing marker in the store,
        so only one of them calls the resolver.
    SCOPED: No coordination; every caller that misses calls the resolver.
    """

    SHARED = "SHARED"
    SCOPED = "SCOPED"


@dataclass(frozen=True)
class FieldCacheConfig:
    """Cache configuration of a single field.

    Attributes:
        ttl: Lifetime of a completed entry, in seconds.
        cache_key: Ordered key tokens (``parent``, ``args.id``...).
        type: SHARED or SCOPED coordination.
        polling_timeout: Lifetime of a processing marker, in seconds.
        ping_interval: Delay between polls while waiting, in milliseconds.
    """

    ttl: int = DEFAULT_TTL
    cache_key: tuple[str, ...] = DEFAULT_CACHE_KEY
    type: CacheType = CacheType.SHARED
    polling_timeout: int = DEFAULT_POLLING_TIMEOUT
    ping_interval: int = DEFAULT_PING_INTERVAL

    @property
    def ttl_delta(self) -> timedelta:
        return timedelta(seconds=self.ttl)

    @property
    def polling_timeout_delta(self) -> timedelta:
        return timedelta(seconds=self.polling_timeout)

    @property
    def ping_interval_seconds(self) -> float:
        return self.ping_interval / 1000

    @property
    def max_polls(self) -> int:
        """Number of polls that fit into one processing marker lifetime."""
        return max(1, math.ceil(self.polling_timeout * 1000 / self.ping_interval))

    @property
    def is_shared(self) -> bool:
        return self.type is CacheType.SHARED
