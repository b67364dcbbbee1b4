"""Core domain layer for cachedirective."""

from cachedirective.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheStatus,
    CacheType,
    FieldCacheConfig,
)
from cachedirective.core.interfaces import (
    IAtomicCacheBackend,
    ICacheBackend,
    IKeyCompiler,
    ISerializer,
)
from cachedirective.core.services import CacheCoordinator, FieldCacheInterceptor

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheStatus",
    "CacheType",
    "FieldCacheConfig",
    # Interfaces
    "ICacheBackend",
    "IAtomicCacheBackend",
    "IKeyCompiler",
    "ISerializer",
    # Services
    "CacheCoordinator",
    "FieldCacheInterceptor",
]
