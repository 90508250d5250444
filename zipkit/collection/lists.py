"""List helpers

Creation, lookup and combination of lists. Every function accepts None in
place of a collection and always returns a new list unless stated."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from kungfu import Error, Ok, Result

from .._errors import IndexLookupError
from .._types import Predicate
from .common import is_empty, size_of


def list_of[T, R](
    source: Iterable[T] | None,
    key: Callable[[T], R] | None = None,
) -> list[T] | list[R]:
    """
    Copy items into a new list, optionally mapping them through `key`.

    `key` is never called with None: None items stay None.

    Example:
        list_of(None)                         # []
        list_of((1, None, 3), lambda x: x * 2)  # [2, None, 6]
    """
    if source is None:
        return []
    if key is None:
        return list(source)
    return [None if item is None else key(item) for item in source]


def non_null_list_of[T](source: Iterable[T | None] | None) -> list[T]:
    if source is None:
        return []
    return [item for item in source if item is not None]


def empty_list_if_none[T](source: Iterable[T] | None) -> list[T]:
    """[] for None, the same object for a list, a copy for anything else."""
    if source is None:
        return []
    if isinstance(source, list):
        return source
    return list(source)


def first_index_match[T](predicate: Predicate[T], items: Sequence[T] | None) -> int:
    """Index of the first item matching predicate, or -1."""
    if is_empty(items):
        return -1
    for index, item in enumerate(items):  # type: ignore[arg-type]
        if predicate(item):
            return index
    return -1


def last_index_match[T](predicate: Predicate[T], items: Sequence[T] | None) -> int:
    """Index of the last item matching predicate, or -1."""
    if is_empty(items):
        return -1
    for index in range(len(items) - 1, -1, -1):  # type: ignore[arg-type]
        if predicate(items[index]):  # type: ignore[index]
            return index
    return -1


def element_at[T](index: int, items: Sequence[T] | None) -> T | None:
    """
    Item at index, or None when out of range.

    Negative indexes count from the end:
        element_at(-1, [1, 5, 8, 12])  # 12
        element_at(-5, [1, 5, 8, 12])  # None
    """
    if is_empty(items):
        return None
    size = len(items)  # type: ignore[arg-type]
    position = size + index if index < 0 else index
    if position < 0 or position >= size:
        return None
    return items[position]  # type: ignore[index]


def find_element_at[T](index: int, items: Sequence[T] | None) -> Result[T, IndexLookupError]:
    """Like element_at, but Error when there is nothing (or None) at index."""
    value = element_at(index, items)
    if value is None:
        return Error(IndexLookupError(index, size_of(items)))
    return Ok(value)


def first_of[T](items: Sequence[T] | None) -> T | None:
    return element_at(0, items)


def last_of[T](items: Sequence[T] | None) -> T | None:
    return element_at(-1, items)


def find_first_of[T](items: Sequence[T] | None) -> Result[T, IndexLookupError]:
    return find_element_at(0, items)


def find_last_of[T](items: Sequence[T] | None) -> Result[T, IndexLookupError]:
    return find_element_at(-1, items)


def move_element_to[T](index: int, element: T | None, items: Sequence[T] | None) -> list[T]:
    """
    Copy of items with every occurrence of element removed and one
    inserted at index. Out-of-range index or None element: plain copy.

    Example:
        move_element_to(0, 3, [1, 2, 3])  # [3, 1, 2]
    """
    if is_empty(items) or element is None or index < 0 or index >= size_of(items):
        return list_of(items)
    result = [item for item in items if item != element]  # type: ignore[union-attr]
    result.insert(index, element)
    return result


def move_element_to_head[T](element: T | None, items: Sequence[T] | None) -> list[T]:
    return move_element_to(0, element, items)


def move_element_to_tail[T](element: T | None, items: Sequence[T] | None) -> list[T]:
    return move_element_to(size_of(items) - 1, element, items)


def concat[T](head: Iterable[T] | None, tail: Iterable[T] | None) -> list[T]:
    return list_of(head) + list_of(tail)


def merge[T](head: Iterable[T] | None, tail: Iterable[T] | None) -> list[T]:
    """Head followed by the tail items that do not appear in head."""
    result = list_of(head)
    seen = set(result)
    result.extend(item for item in list_of(tail) if item not in seen)
    return result


def in_both[T](left: Iterable[T] | None, right: Iterable[T] | None) -> list[T]:
    """Left items that also appear in right, in left order."""
    right_set = set(list_of(right))
    return [item for item in list_of(left) if item in right_set]


def in_left_only[T](left: Iterable[T] | None, right: Iterable[T] | None) -> list[T]:
    right_set = set(list_of(right))
    return [item for item in list_of(left) if item not in right_set]


def in_right_only[T](left: Iterable[T] | None, right: Iterable[T] | None) -> list[T]:
    left_set = set(list_of(left))
    return [item for item in list_of(right) if item not in left_set]


def different[T](left: Iterable[T] | None, right: Iterable[T] | None) -> list[T]:
    """Items of left then right that are not present in both."""
    left_items = list_of(left)
    right_items = list_of(right)
    shared = set(left_items) & set(right_items)
    return [item for item in left_items + right_items if item not in shared]


__all__ = (
    "concat",
    "different",
    "element_at",
    "empty_list_if_none",
    "find_element_at",
    "find_first_of",
    "find_last_of",
    "first_index_match",
    "first_of",
    "in_both",
    "in_left_only",
    "in_right_only",
    "last_index_match",
    "last_of",
    "list_of",
    "merge",
    "move_element_to",
    "move_element_to_head",
    "move_element_to_tail",
    "non_null_list_of",
)
