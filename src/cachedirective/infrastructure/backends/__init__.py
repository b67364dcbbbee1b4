"""Cache backend implementations."""

from cachedirective.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
