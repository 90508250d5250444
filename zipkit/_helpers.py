"""Internal helpers for zipkit.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ._types import BiFunction

# Sentinel for "no value given" where None is a legal value
MISSING: typing.Any = object()


def spread[L, R, U](fn: BiFunction[L, R, U]) -> Callable[[Iterable[typing.Any]], U]:
    """
    Turn a two-argument function into one taking a two-slot value.

    Works for anything that unpacks into exactly two items: Couple,
    dict items, 2-tuples.

    Usage:
        add = spread(lambda a, b: a + b)
        add(Couple(1, 2))  # 3
        add((1, 2))        # 3
    """

    def apply(pair: Iterable[typing.Any]) -> U:
        left, right = pair
        return fn(left, right)

    return apply


__all__ = (
    "MISSING",
    "spread",
)
