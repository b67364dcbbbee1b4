"""Infrastructure layer implementations for cachedirective."""

from cachedirective.infrastructure.backends import InMemoryCacheBackend
from cachedirective.infrastructure.key_builders import CacheKeyCompiler
from cachedirective.infrastructure.serializers import (
    JsonSerializer,
    SerializationError,
)

__all__ = [
    "InMemoryCacheBackend",
    "CacheKeyCompiler",
    "JsonSerializer",
    "SerializationError",
]
