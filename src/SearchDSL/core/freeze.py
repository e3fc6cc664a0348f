"""Value-copy helpers for query bodies.

Bodies are stored frozen: every mapping becomes a read-only
``MappingProxyType`` over a private dict, every sequence becomes a tuple
and every set becomes a frozenset.
`thaw` turns a frozen value back into plain ``dict``/``list`` objects that
callers may mutate freely.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Mapping


def deep_clone(value: Any) -> Any:
    """Recursively copy mappings and sequences.

    Args:
        value: Any body value.

    Returns:
        A structurally equal copy sharing no containers with ``value``.
    """
    if isinstance(value, Mapping):
        return {key: deep_clone(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [deep_clone(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return set(value)
    if isinstance(value, datetime):
        return value.replace()
    if isinstance(value, date):
        return date.fromordinal(value.toordinal())
    return value


def deep_freeze(value: Any) -> Any:
    """Copy ``value`` into a read-only structure.

    Args:
        value: Any body value.

    Returns:
        Frozen copy: mappings are ``MappingProxyType``, sequences are tuples
        and sets are frozensets.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    return deep_clone(value)


def thaw(value: Any) -> Any:
    """Return a plain, mutable deep copy of a (possibly frozen) value."""
    return deep_clone(value)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialize a body value to JSON text.

    Dates are written in ISO-8601 form.
    """
    return json.dumps(thaw(value), indent=indent, sort_keys=sort_keys, ensure_ascii=False, default=_json_default)


def structural_equal(left: Any, right: Any) -> bool:
    """Compare two body values the way their JSON documents would compare.

    Mapping key order is ignored, sequence order is not, and booleans never
    equal numbers. Values JSON cannot encode are compared with ``==``.
    """
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)) or left.keys() != right.keys():
            return False
        return all(structural_equal(item, right[key]) for key, item in left.items())
    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))) or len(left) != len(right):
            return False
        return all(structural_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return left is right


def structural_key(value: Any) -> Any:
    """Return a hashable key consistent with `structural_equal`."""
    if isinstance(value, Mapping):
        return frozenset((key, structural_key(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return ("seq", tuple(structural_key(item) for item in value))
    if isinstance(value, (set, frozenset)):
        return ("set", frozenset(value))
    if isinstance(value, bool):
        return ("bool", value)
    try:
        hash(value)
    except TypeError:
        return ("unhashable", type(value).__name__)
    return value
