"""Parser for @cache directives in GraphQL schemas.

Reads the ``@cache`` directive attached to a field definition and turns
its arguments into a FieldCacheConfig. Missing or malformed arguments
never fail resolution; they fall back to the configured defaults.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from graphql import DirectiveNode, GraphQLField, value_from_ast_untyped

from cachedirective.core.entities.cache_config import CacheConfig
from cachedirective.core.entities.field_cache_config import CacheType, FieldCacheConfig

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# The @cache directive definition to add to schemas
CACHE_DIRECTIVE = '''
"""Field-level result caching."""
directive @cache(
  """Lifetime of the cached result in seconds."""
  ttl: Int
  """Key tokens: parent, args, vars or source.property."""
  cacheKey: [String!]
  """Coordination between concurrent resolutions of the same key."""
  type: CacheType
  """Lifetime of the processing marker in seconds."""
  pollingTimeout: Int
  """Delay between polls while another resolution is in flight, in ms."""
  pingInterval: Int
) on FIELD_DEFINITION

"""Cache coordination type."""
enum CacheType {
  """Concurrent callers wait for a single resolution."""
  SHARED
  """Every caller that misses resolves on its own."""
  SCOPED
}
'''

_MISSING = object()


class DirectiveArgumentReader:
    """Reads typed arguments from a directive.

    Accepts either a graphql-core DirectiveNode (argument values are
    still AST literals) or a mapping of already coerced values, such as
    the ``args`` Ariadne hands to schema directive visitors.
    """

    def __init__(self, directive: DirectiveNode | Mapping[str, Any] | None) -> None:
        self._values = self._extract_values(directive)

    @staticmethod
    def _extract_values(
        directive: DirectiveNode | Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        if directive is None:
            return {}
        if isinstance(directive, Mapping):
            return dict(directive)

        values: dict[str, Any] = {}
        for arg in directive.arguments or ():
            values[arg.name.value] = value_from_ast_untyped(arg.value)
        return values

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        """Get the raw value of an argument.

        Args:
            name: The argument name.
            default: Value returned when the argument is absent or null.

        Returns:
            The argument value, or default.
        """
        value = self._values.get(name)
        return default if value is None else value

    def get_int(self, name: str, default: int) -> int:
        """Get a positive integer argument."""
        value = self._values.get(name, _MISSING)
        if value is _MISSING or value is None:
            return default

        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)

        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.debug("Invalid value %r for argument %r, using %r", value, name, default)
            return default
        return value

    def get_str(self, name: str, default: str) -> str:
        """Get a string argument."""
        value = self._values.get(name)
        if isinstance(value, Enum):
            value = value.name
        if not isinstance(value, str):
            if value is not None:
                logger.debug(
                    "Invalid value %r for argument %r, using %r", value, name, default
                )
            return default
        return value

    def get_str_list(self, name: str, default: tuple[str, ...]) -> tuple[str, ...]:
        """Get a list of strings, accepting a single string as a one-item list."""
        value = self._values.get(name)
        if value is None:
            return default

        items = [value] if isinstance(value, str) else value
        if not isinstance(items, (list, tuple)) or not items:
            logger.debug("Invalid value %r for argument %r, using %r", value, name, default)
            return default
        if not all(isinstance(item, str) for item in items):
            logger.debug("Invalid value %r for argument %r, using %r", value, name, default)
            return default
        return tuple(items)

    def get_enum(self, name: str, enum_cls: type[E], default: E) -> E:
        """Get an enum argument by member name."""
        value = self._values.get(name)
        if isinstance(value, enum_cls):
            return value

        raw = self.get_str(name, "")
        try:
            return enum_cls[raw.upper()]
        except KeyError:
            if raw:
                logger.debug(
                    "Invalid value %r for argument %r, using %r", raw, name, default
                )
            return default


class DirectiveParser:
    """Extracts @cache configuration from GraphQL field definitions."""

    def __init__(self, config: CacheConfig | None = None) -> None:
        """Initialize the directive parser.

        Args:
            config: Supplies the directive name and argument defaults.
        """
        self._config = config or CacheConfig()

    @property
    def directive_name(self) -> str:
        return self._config.directive_name

    def get_cache_directive(self, field: GraphQLField) -> DirectiveNode | None:
        """Find the @cache directive on a field definition.

        Args:
            field: A graphql-core field definition.

        Returns:
            The directive node, or None if the field is not cached.
        """
        ast_node = getattr(field, "ast_node", None)
        if ast_node is None:
            return None

        for directive in ast_node.directives or ():
            if directive.name.value == self._config.directive_name:
                return directive

        return None

    def has_cache_directive(self, field: GraphQLField) -> bool:
        return self.get_cache_directive(field) is not None

    def parse_field(self, field: GraphQLField) -> FieldCacheConfig | None:
        """Build the cache configuration of a field.

        Returns:
            The FieldCacheConfig, or None if the field has no @cache directive.
        """
        directive = self.get_cache_directive(field)
        if directive is None:
            return None
        return self.parse_directive(directive)

    def parse_directive(
        self,
        directive: DirectiveNode | Mapping[str, Any] | None,
    ) -> FieldCacheConfig:
        """Build a FieldCacheConfig from directive arguments, applying defaults."""
        reader = DirectiveArgumentReader(directive)
        config = self._config

        return FieldCacheConfig(
            ttl=reader.get_int("ttl", config.default_ttl),
            cache_key=reader.get_str_list("cacheKey", config.default_cache_key),
            type=reader.get_enum("type", CacheType, config.default_type),
            polling_timeout=reader.get_int(
                "pollingTimeout", config.default_polling_timeout
            ),
            ping_interval=reader.get_int("pingInterval", config.default_ping_interval),
        )


def get_cache_directive_sdl(name: str = "cache") -> str:
    """Get the SDL definition for the @cache directive.

    Add this to your schema to enable the directive.

    Args:
        name: Directive name to declare, for schemas that register the
            directive under another name.

    Returns:
        The SDL string for the directive definition.
    """
    if name == "cache":
        return CACHE_DIRECTIVE
    return CACHE_DIRECTIVE.replace("directive @cache(", f"directive @{name}(")
