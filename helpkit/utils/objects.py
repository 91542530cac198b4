"""
Object shaping helpers for plain dict records.

All helpers return new dicts and leave their inputs untouched.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from helpkit.core.exceptions import ObjectHashError
from helpkit.core.logging import objects_logger


def prune_object(obj: Any) -> Any:
    """
    Remove all None-valued entries from dicts, recursively.

    Behaves like a JSON round-trip: the result is a fresh copy, tuples
    become lists, and None elements inside lists are kept.

    Example:
        >>> prune_object({"a": 1, "b": None})
        {'a': 1}
    """
    if isinstance(obj, Mapping):
        return {key: prune_object(value) for key, value in obj.items() if value is not None}
    if isinstance(obj, (list, tuple)):
        return [prune_object(value) for value in obj]
    return obj


def pick(base: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    Pick a subset of keys from a dict; missing or None values become "".

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'a': 1, 'c': 3}
    """
    picked = {}
    for key in keys:
        value = base.get(key)
        picked[key] = "" if value is None else value
    return picked


def object_map(
    obj: Mapping[str, Any],
    get_value: Optional[Callable[[Any, str], Any]] = None,
    get_key: Optional[Callable[[str, Any], str]] = None,
) -> Dict[str, Any]:
    """
    Transform a dict entry by entry.

    Args:
        obj: Source dict
        get_value: Called as ``get_value(value, key)``; keeps the value when omitted
        get_key: Called as ``get_key(key, value)``; keeps the key when omitted

    Example:
        >>> object_map({"a": 1, "b": 2}, get_value=lambda v, k: v * 2,
        ...            get_key=lambda k, v: k.upper())
        {'A': 2, 'B': 4}
    """
    return {
        (get_key(key, value) if get_key else key): (get_value(value, key) if get_value else value)
        for key, value in obj.items()
    }


def create_object_hash(obj: Mapping[str, Any]) -> str:
    """
    Deterministic key for a dict, independent of its field order.

    The top-level keys are sorted by ordinal (code point) order, so ``"B"``
    sorts before ``"a"``; this is not locale-aware collation. The dict is
    then serialized to compact JSON and hashed with SHA-256. Returns the hex
    digest.

    Raises:
        ObjectHashError: If ``obj`` is not a dict or holds values JSON cannot encode
    """
    if not isinstance(obj, Mapping):
        raise ObjectHashError(
            "Only mappings can be hashed", details={"type": type(obj).__name__}
        )

    try:
        payload = json.dumps(
            {key: obj[key] for key in sorted(obj)},
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise ObjectHashError(f"Object is not JSON serializable: {e}") from e

    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    objects_logger.debug("Created object hash", fields=len(obj), digest=digest)
    return digest
