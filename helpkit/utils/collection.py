"""
Collection helpers: filtering, de-duplication, grouping and lookups.

Filter predicates take ``(value, index, sequence)`` so they can drive a
comprehension over ``enumerate``::

    [v for i, v in enumerate(names) if unique(v, i, names)]

``dedupe`` and ``dedupe_by`` do exactly that for the common case.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")
U = TypeVar("U")


def is_value(value: Optional[T]) -> bool:
    """
    Filter utility to drop empty values.

    Example:
        >>> prices = [{"centAmount": 20}, None, {"centAmount": 30}]
        >>> [p["centAmount"] for p in prices if is_value(p)]
        [20, 30]
    """
    return value is not None


def _first_index(sequence: Sequence[T], matches: Callable[[T], bool]) -> int:
    for index, element in enumerate(sequence):
        if matches(element):
            return index
    return -1


def unique(value: T, index: int, sequence: Sequence[T]) -> bool:
    """True iff ``value`` is the first element of ``sequence`` equal to itself."""
    return _first_index(sequence, lambda e: e == value) == index


def unique_by(get_key: Callable[[T], Any]) -> Callable[[T, int, Sequence[T]], bool]:
    """
    Build a filter predicate that keeps the first item for each extracted key.

    Example:
        >>> products = [{"id": "a"}, {"id": "a"}, {"id": "b"}]
        >>> keep = unique_by(lambda p: p["id"])
        >>> [p for i, p in enumerate(products) if keep(p, i, products)]
        [{'id': 'a'}, {'id': 'b'}]
    """

    def predicate(value: T, index: int, sequence: Sequence[T]) -> bool:
        key = get_key(value)
        return _first_index(sequence, lambda e: get_key(e) == key) == index

    return predicate


def dedupe(items: Sequence[T]) -> List[T]:
    """Return ``items`` without duplicates, keeping first occurrences in order."""
    return [value for index, value in enumerate(items) if unique(value, index, items)]


def dedupe_by(items: Sequence[T], get_key: Callable[[T], Any]) -> List[T]:
    """Return ``items`` without duplicate keys, keeping first occurrences in order."""
    keep = unique_by(get_key)
    return [value for index, value in enumerate(items) if keep(value, index, items)]


def group_by_map(items: Sequence[T], get_key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Group ``items`` by the result of ``get_key``.

    Keys appear in order of first occurrence and each group keeps the
    original item order.

    Example:
        >>> group_by_map([{"age": 18, "name": "John"}, {"age": 16, "name": "Jack"}],
        ...              lambda p: p["age"])
        {18: [{'age': 18, 'name': 'John'}], 16: [{'age': 16, 'name': 'Jack'}]}
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        key = get_key(item)
        collection = groups.get(key)
        if collection is None:
            groups[key] = [item]
        else:
            collection.append(item)
    return groups


def group_by(items: Sequence[T], get_key: Callable[[T], K]) -> List[Tuple[K, List[T]]]:
    """Same as ``group_by_map`` but returns ``(key, group)`` pairs."""
    return list(group_by_map(items, get_key).items())


def find_first(
    ids: Sequence[Hashable],
    items: Sequence[Optional[T]],
    get_id: Callable[[T], Hashable],
) -> Optional[T]:
    """
    Find the first item matching the highest-priority id.

    Ids are tried in order; for each id every item is scanned, so an earlier
    id wins even when a later id matches an earlier item. Falsy items are
    skipped.

    Example:
        >>> products = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
        >>> find_first(["x", "b"], products, lambda p: p["id"])
        {'id': 'b'}
    """
    for id_ in ids:
        item = next((p for p in items if p and get_id(p) == id_), None)
        if item:
            return item
    return None


def find_first_indexed(
    ids: Sequence[Hashable],
    items: Sequence[Optional[T]],
    get_id: Callable[[T], Hashable],
) -> Optional[T]:
    """
    ``find_first`` backed by a one-pass index, for long id or item lists.

    Ids that cannot be hashed fall back to the linear ``find_first`` scan.
    """
    index: Dict[Hashable, T] = {}
    try:
        for item in items:
            if item:
                index.setdefault(get_id(item), item)
        for id_ in ids:
            item = index.get(id_)
            if item:
                return item
    except TypeError:
        return find_first(ids, items, get_id)
    return None


def range_list(end: int, start: int = 0) -> List[int]:
    """
    Integers from ``start`` up to, but not including, ``end``.

    Example:
        >>> range_list(3)
        [0, 1, 2]
        >>> range_list(3, start=1)
        [1, 2]
    """
    return list(range(start, end))


def zip_pairs(a: Sequence[T], b: Sequence[U]) -> List[Tuple[T, Optional[U]]]:
    """Pair each element of ``a`` with the same index of ``b`` (None when missing)."""
    return [(value, b[index] if index < len(b) else None) for index, value in enumerate(a)]
