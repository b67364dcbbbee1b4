"""Hashing utilities for cache key generation."""

import dataclasses
import hashlib
import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID


def canonical_json(value: Any) -> str:
    """Serialize a value to a canonical JSON string.

    Keys are sorted and separators are compact so that structurally equal
    values always produce the same text.

    Args:
        value: The value to serialize.

    Returns:
        The canonical JSON representation.
    """
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_encoder,
    )


def hash_value(value: Any) -> str:
    """Create a deterministic MD5 hex digest of a value.

    Args:
        value: Any value accepted by canonical_json().

    Returns:
        A 32-character hexadecimal digest.
    """
    normalized = canonical_json(value)
    return hashlib.md5(normalized.encode("utf-8")).hexdigest()


def _default_encoder(obj: Any) -> Any:
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if isinstance(obj, (Decimal, UUID)):
        return str(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)

    slots = _slot_values(obj)
    if slots is not None:
        return slots

    raise TypeError(
        f"Object of type {type(obj).__name__} cannot be used in a cache key"
    )


def _slot_values(obj: Any) -> dict[str, Any] | None:
    """Collect the assigned __slots__ attributes of obj across its MRO."""
    values: dict[str, Any] | None = None
    for cls in type(obj).__mro__:
        if "__slots__" not in cls.__dict__:
            continue
        if values is None:
            values = {}

        slots = cls.__dict__["__slots__"]
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in values:
                continue
            attr = name
            if name.startswith("__") and not name.endswith("__"):
                attr = f"_{cls.__name__.lstrip('_')}{name}"
            if hasattr(obj, attr):
                values[name] = getattr(obj, attr)
    return values
