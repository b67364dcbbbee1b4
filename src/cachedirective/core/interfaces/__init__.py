"""Core interfaces (Protocol classes) for cachedirective."""

from cachedirective.core.interfaces.cache_backend import (
    IAtomicCacheBackend,
    ICacheBackend,
)
from cachedirective.core.interfaces.key_builder import IKeyCompiler
from cachedirective.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IAtomicCacheBackend",
    "IKeyCompiler",
    "ISerializer",
]
