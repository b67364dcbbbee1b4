"""Ariadne framework adapter for cachedirective."""

from cachedirective.adapters.ariadne.directive import cache_directive
from cachedirective.adapters.ariadne.schema import make_cached_schema

__all__ = [
    "cache_directive",
    "make_cached_schema",
]
