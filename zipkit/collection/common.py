"""Null-safe checks shared by every collection helper.

None counts as empty. Unsized iterables (iterators, generators) are never
consumed by these checks: their size is unknown, so they count as non-empty."""

from __future__ import annotations

import typing
from collections.abc import Sized


def size_of(collection: Sized | None) -> int:
    """0 for None, otherwise len(collection)."""
    if collection is None:
        return 0
    return len(collection)


def is_empty(collection: typing.Any) -> bool:
    if collection is None:
        return True
    if isinstance(collection, Sized):
        return len(collection) == 0
    return False


def is_not_empty(collection: typing.Any) -> bool:
    return not is_empty(collection)


__all__ = ("is_empty", "is_not_empty", "size_of")
