"""Ariadne schema directive visitor for @cache."""

from ariadne import SchemaDirectiveVisitor
from graphql import GraphQLField, GraphQLInterfaceType, GraphQLObjectType

from cachedirective.core.services.cache_coordinator import CacheCoordinator
from cachedirective.core.services.field_interceptor import FieldCacheInterceptor


def cache_directive(
    coordinator: CacheCoordinator,
    interceptor: FieldCacheInterceptor | None = None,
) -> type[SchemaDirectiveVisitor]:
    """Create a @cache directive visitor bound to a coordinator.

    Ariadne instantiates directive visitors itself, so the coordinator is
    bound to a freshly created class instead of a module-level global.
    Each schema can therefore use its own backend.

    Usage:
        coordinator = CacheCoordinator(RedisCacheBackend())

        schema = make_executable_schema(
            [type_defs, get_cache_directive_sdl()],
            query,
            directives={"cache": cache_directive(coordinator)},
        )

    Args:
        coordinator: The coordinator cached fields are routed through.
        interceptor: Optional preconfigured interceptor.

    Returns:
        A SchemaDirectiveVisitor subclass.
    """
    field_interceptor = interceptor or FieldCacheInterceptor(coordinator)

    class CacheDirective(SchemaDirectiveVisitor):
        """Wraps the resolver of every field decorated with @cache."""

        interceptor = field_interceptor

        def visit_field_definition(
            self,
            field: GraphQLField,
            object_type: GraphQLObjectType | GraphQLInterfaceType,
        ) -> GraphQLField:
            field.resolve = self.interceptor.wrap(field)
            return field

    return CacheDirective
