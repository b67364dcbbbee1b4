"""Key compiler for the @cache directive."""

import logging
from collections.abc import Mapping
from typing import Any

from cachedirective.core.entities.field_cache_config import FieldCacheConfig
from cachedirective.utils.hashing import hash_value

logger = logging.getLogger(__name__)

KEY_SOURCES = ("parent", "args", "vars")


class CacheKeyCompiler:
    """Compiles a field's cacheKey tokens into a cache key.

    Each cacheKey token is either a bare source (``parent``,
    ``args`` or ``vars``), which takes the whole source value, or a
    ``source.property`` pair, which takes one property of it. The
    extracted values are combined in token order, serialized as canonical
    JSON and hashed with MD5::

        ch-0f343b0931126a20f133d67c2b018a3b

    Tokens naming any other source contribute nothing to the key.
    """

    def __init__(self, prefix: str = "ch-") -> None:
        """Initialize the key compiler.

        Args:
            prefix: Literal prefix of every compiled key.
        """
        self._prefix = prefix
        self._reported: set[str] = set()

    @property
    def prefix(self) -> str:
        return self._prefix

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
            The prefixed hex digest.
        """
        sources = {"parent": parent, "args": args, "vars": variables}
        combo = []

        for token in config.cache_key:
            source, _, prop = token.partition(".")

            if source not in KEY_SOURCES:
                self._report_unknown(token)
                continue

            value = sources[source]
            if prop:
                value = _get_property(value, prop)
            combo.append(value)

        return f"{self._prefix}{hash_value(combo)}"

    def _report_unknown(self, token: str) -> None:
        if token in self._reported:
            return
        self._reported.add(token)
        logger.warning(
            "Ignoring cache key token %r: source must be one of %s",
            token,
            ", ".join(KEY_SOURCES),
        )


def _get_property(value: Any, prop: str) -> Any:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(prop)
    return getattr(value, prop, None)
