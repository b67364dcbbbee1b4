"""Redis backend for cachedirective."""

from cachedirective_redis.backend import RedisCacheBackend

__all__ = ["RedisCacheBackend"]
