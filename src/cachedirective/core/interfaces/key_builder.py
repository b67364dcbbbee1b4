"""Key compiler interface."""

from typing import Any, Protocol

from cachedirective.core.entities.field_cache_config import FieldCacheConfig


class IKeyCompiler(Protocol):
    """Contract for building cache keys for a field resolution.

    Key compilers must be pure: identical inputs always yield the
    same key.
    """

    def compile(
        self,
        config: FieldCacheConfig,
        parent: Any,
        args: dict[str, Any] | None,
        variables: dict[str, Any] | None,
    ) -> str:
        """Build the cache key of one field resolution.

        Args:
            config: The field's cache configuration.
            parent: The parent value passed to the resolver.
            args: The field arguments.
            variables: The operation's variable values.

        Returns:
            The cache key string.
        """
        ...
