"""Map helpers

Build dicts from collections by extracting a key (and optionally a value)
from each item. On a repeated key the first item wins."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..guard import check_not_none


def map_of[E, K, V](
    source: Iterable[E] | None,
    key: Callable[[E], K],
    value: Callable[[E], V] | None = None,
) -> dict[K, V] | dict[K, E]:
    """
    Index items by key.

    Example:
        map_of(["apple", "avocado", "beet"], lambda s: s[0])
        # {"a": "apple", "b": "beet"}
    """
    check_not_none(key, "Key provider must not be None.")
    result: dict = {}
    for item in source or ():
        item_key = key(item)
        if item_key not in result:
            result[item_key] = item if value is None else value(item)
    return result


def non_null_map_of[E, K, V](
    source: Iterable[E] | None,
    key: Callable[[E], K | None],
    value: Callable[[E], V | None] | None = None,
) -> dict[K, V] | dict[K, E]:
    """Like map_of, skipping items whose key or value is None. Each provider runs once per item."""
    check_not_none(key, "Key provider must not be None.")
    result: dict = {}
    for item in source or ():
        item_key = key(item)
        if item_key is None or item_key in result:
            continue
        item_value = item if value is None else value(item)
        if item_value is not None:
            result[item_key] = item_value
    return result


def empty_map_if_none[K, V](mapping: dict[K, V] | None) -> dict[K, V]:
    return {} if mapping is None else mapping


__all__ = ("empty_map_if_none", "map_of", "non_null_map_of")
