"""Field resolution interceptor for the @cache directive."""

import functools
import inspect
import logging
from typing import Any

from graphql import (
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    default_field_resolver,
)

from cachedirective.core.interfaces.key_builder import IKeyCompiler
from cachedirective.core.services.cache_coordinator import CacheCoordinator
from cachedirective.core.services.directive_parser import DirectiveParser
from cachedirective.infrastructure.key_builders.directive import CacheKeyCompiler

logger = logging.getLogger(__name__)


class FieldCacheInterceptor:
    """Wraps field resolvers with @cache handling.

    The wrapper reads the field's @cache configuration on every call,
    compiles the cache key from the parent value, the field arguments and
    the operation variables, and lets the coordinator decide whether the
    original resolver runs.
    """

    def __init__(
        self,
        coordinator: CacheCoordinator,
        parser: DirectiveParser | None = None,
        key_compiler: IKeyCompiler | None = None,
    ) -> None:
        """Initialize the interceptor.

        Args:
            coordinator: The coordinator that owns the cache backend.
            parser: Directive parser. Defaults to one using the
                coordinator's configuration.
            key_compiler: Key compiler. Defaults to CacheKeyCompiler with
                the configured key prefix.
        """
        self._coordinator = coordinator
        self._parser = parser or DirectiveParser(coordinator.config)
        self._key_compiler = key_compiler or CacheKeyCompiler(
            prefix=coordinator.config.key_prefix
        )

    @property
    def coordinator(self) -> CacheCoordinator:
        return self._coordinator

    @property
    def parser(self) -> DirectiveParser:
        return self._parser

    def wrap(self, field: GraphQLField) -> GraphQLFieldResolver:
        """Build the caching resolver of a field.

        Fields without a @cache directive keep their original resolver.

        Args:
            field: The graphql-core field definition.

        Returns:
            The resolver to install on the field.
        """
        original = field.resolve or default_field_resolver

        if not self._parser.has_cache_directive(field):
            return original

        @functools.wraps(original)
        async def resolve(parent: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
            field_config = None
            if self._coordinator.config.enabled:
                field_config = self._parser.parse_field(field)

            if field_config is None:
                result = original(parent, info, **args)
                if inspect.isawaitable(result):
                    result = await result
                return result

            key = self._key_compiler.compile(
                field_config, parent, args, info.variable_values
            )
            logger.debug(
                "Resolving %s.%s through cache key %s",
                info.parent_type.name,
                info.field_name,
                key,
            )
            return await self._coordinator.resolve(
                key,
                field_config,
                lambda: original(parent, info, **args),
            )

        return resolve

    def apply(self, schema: GraphQLSchema) -> GraphQLSchema:
        """Install caching resolvers on every @cache field of a schema.

        Args:
            schema: The executable graphql-core schema.

        Returns:
            The same schema, modified in place.
        """
        for type_name, type_def in schema.type_map.items():
            # Skip introspection types
            if type_name.startswith("__"):
                continue
            if not isinstance(type_def, GraphQLObjectType):
                continue

            for field_name, field in type_def.fields.items():
                if self._parser.has_cache_directive(field):
                    field.resolve = self.wrap(field)
                    logger.debug("Caching enabled for %s.%s", type_name, field_name)

        return schema


def apply_cache_directive(
    schema: GraphQLSchema,
    coordinator: CacheCoordinator,
) -> GraphQLSchema:
    """Enable the @cache directive on a graphql-core schema.

    Example::

        schema = build_schema(get_cache_directive_sdl() + type_defs)
        # ... attach resolvers ...
        apply_cache_directive(schema, CacheCoordinator(InMemoryCacheBackend()))

    Args:
        schema: The executable schema, with resolvers already attached.
        coordinator: The coordinator to route cached fields through.

    Returns:
        The same schema, modified in place.
    """
    return FieldCacheInterceptor(coordinator).apply(schema)
