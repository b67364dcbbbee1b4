"""Key compiler implementations."""

from cachedirective.infrastructure.key_builders.directive import (
    KEY_SOURCES,
    CacheKeyCompiler,
)

__all__ = ["CacheKeyCompiler", "KEY_SOURCES"]
