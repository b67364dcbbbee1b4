"""Domain entities for cachedirective."""

from cachedirective.core.entities.cache_config import CacheConfig
from cachedirective.core.entities.cache_entry import CacheEntry, CacheStatus
from cachedirective.core.entities.field_cache_config import (
    CacheType,
    FieldCacheConfig,
)

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CacheStatus",
    "CacheType",
    "FieldCacheConfig",
]
