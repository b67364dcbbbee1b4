"""Domain services for cachedirective."""

from cachedirective.core.services.cache_coordinator import CacheCoordinator
from cachedirective.core.services.directive_parser import (
    CACHE_DIRECTIVE,
    DirectiveArgumentReader,
    DirectiveParser,
    get_cache_directive_sdl,
)
from cachedirective.core.services.field_interceptor import (
    FieldCacheInterceptor,
    apply_cache_directive,
)

__all__ = [
    "CacheCoordinator",
    # Directive parsing
    "CACHE_DIRECTIVE",
    "DirectiveArgumentReader",
    "DirectiveParser",
    "get_cache_directive_sdl",
    # Resolver wrapping
    "FieldCacheInterceptor",
    "apply_cache_directive",
]
