"""Set helpers

Plain (hash) sets, insertion-ordered "linked" sets backed by dict keys,
and sorted sets returned as sorted lists."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, KeysView


def set_of[T, R](
    source: Iterable[T] | None,
    key: Callable[[T], R] | None = None,
) -> set[T] | set[R]:
    """
    New set from source, optionally mapped through `key`.

    `key` is never called with None: a None item maps to None.
    """
    if source is None:
        return set()
    if key is None:
        return set(source)
    return {None if item is None else key(item) for item in source}  # type: ignore[misc]


def non_null_set_of[T, R](
    source: Iterable[T | None] | None,
    key: Callable[[T], R] | None = None,
) -> set[T] | set[R]:
    """Like set_of, without None before or after mapping."""
    result = set_of(source, key)  # type: ignore[arg-type]
    result.discard(None)  # type: ignore[arg-type]
    return result


def empty_set_if_none[T](source: set[T] | None) -> set[T]:
    return set() if source is None else source


def linked_set_of[T](source: Iterable[T] | None) -> KeysView[T]:
    """
    Distinct items in first-seen order.

    The result is a read-only set view: it supports `in`, `len`, iteration
    and set operators (`&`, `|`, `-`), but not `add` or `discard`. Copy it
    into a dict (`dict.fromkeys(view)`) to keep an ordered, growable set.
    """
    return dict.fromkeys(source or ()).keys()


def non_null_linked_set_of[T](source: Iterable[T | None] | None) -> KeysView[T]:
    """Like linked_set_of, without None. Also a read-only view."""
    return dict.fromkeys(item for item in (source or ()) if item is not None).keys()


def sorted_set_of[T](
    source: Iterable[T] | None,
    *,
    key: Callable[[T], typing.Any] | None = None,
) -> list[T]:
    """Distinct items in ascending order. None items are dropped."""
    return sorted({item for item in (source or ()) if item is not None}, key=key)  # type: ignore[type-var, arg-type]


__all__ = (
    "empty_set_if_none",
    "linked_set_of",
    "non_null_linked_set_of",
    "non_null_set_of",
    "set_of",
    "sorted_set_of",
)
