"""Executable schema helper for Ariadne."""

from typing import Any

from ariadne import make_executable_schema
from graphql import GraphQLSchema

from cachedirective.adapters.ariadne.directive import cache_directive
from cachedirective.core.entities.cache_config import CacheConfig
from cachedirective.core.interfaces.cache_backend import ICacheBackend
from cachedirective.core.interfaces.serializer import ISerializer
from cachedirective.core.services.cache_coordinator import CacheCoordinator
from cachedirective.core.services.directive_parser import get_cache_directive_sdl
from cachedirective.infrastructure.backends.memory import InMemoryCacheBackend


def make_cached_schema(
    type_defs: str | list[str],
    *bindables: Any,
    backend: ICacheBackend | None = None,
    serializer: ISerializer | None = None,
    config: CacheConfig | None = None,
    coordinator: CacheCoordinator | None = None,
    **kwargs: Any,
) -> GraphQLSchema:
    """Build an executable schema with the @cache directive enabled.

    Adds the directive definition to ``type_defs`` and registers the
    directive visitor. Without a backend, results are cached in memory.

    Example::

        schema = make_cached_schema(
            '''
            type Query {
                library(id: ID!): Library
            }

            type Library {
                id: ID!
                books: [Book!]! @cache(cacheKey: "parent.id", ttl: 300)
            }
            ''',
            query,
            library,
            backend=RedisCacheBackend(REDIS_URL),
        )

    Args:
        type_defs: SDL string or list of SDL strings.
        *bindables: Ariadne bindables (QueryType, ObjectType...).
        backend: Cache backend. Defaults to InMemoryCacheBackend.
        serializer: Serializer for stored payloads. Defaults to JSON.
        config: Schema-level cache configuration.
        coordinator: Prebuilt coordinator; overrides backend, serializer
            and config.
        **kwargs: Passed through to ``make_executable_schema``.

    Returns:
        The executable schema.
    """
    if coordinator is None:
        coordinator = CacheCoordinator(
            backend=backend or InMemoryCacheBackend(),
            serializer=serializer,
            config=config,
        )

    directive_name = coordinator.config.directive_name
    directive_sdl = get_cache_directive_sdl(directive_name)

    if isinstance(type_defs, str):
        type_defs = [type_defs, directive_sdl]
    else:
        type_defs = [*type_defs, directive_sdl]

    directives = dict(kwargs.pop("directives", None) or {})
    directives[directive_name] = cache_directive(coordinator)

    return make_executable_schema(type_defs, *bindables, directives=directives, **kwargs)
