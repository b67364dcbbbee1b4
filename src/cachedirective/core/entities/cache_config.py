"""Cache configuration entity."""

from dataclasses import dataclass

from cachedirective.core.entities.field_cache_config import (
    DEFAULT_CACHE_KEY,
    DEFAULT_PING_INTERVAL,
    DEFAULT_POLLING_TIMEOUT,
    DEFAULT_TTL,
    CacheType,
)


@dataclass
class CacheConfig:
    """Schema-level cache configuration.

    Holds the feature toggles and the defaults applied to every ``@cache``
    directive argument that a field leaves out.

    Atomic claims:
        When atomic_claims=True and the backend provides ``add()``
        (set-if-absent), a SHARED caller stakes its processing claim
        atomically instead of with a plain read-then-write.
    """

    enabled: bool = True
    key_prefix: str = "ch-"
    directive_name: str = "cache"

    # Defaults for omitted directive arguments
    default_ttl: int = DEFAULT_TTL
    default_cache_key: tuple[str, ...] = DEFAULT_CACHE_KEY
    default_type: CacheType = CacheType.SHARED
    default_polling_timeout: int = DEFAULT_POLLING_TIMEOUT
    default_ping_interval: int = DEFAULT_PING_INTERVAL

    atomic_claims: bool = False

    def __post_init__(self) -> None:
        """Normalize the default cache key to a tuple."""
        if isinstance(self.default_cache_key, str):
            self.default_cache_key = (self.default_cache_key,)
        else:
            self.default_cache_key = tuple(self.default_cache_key)
