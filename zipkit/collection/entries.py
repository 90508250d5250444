"""Entry adapters

Turn two-argument callables into callables over a single (key, value)
item, for use with dict.items(), sorted(), filter() and friends. They
work the same on Couple values.

Example:
    scores = {"ann": 3, "bob": 7}
    list(filter(predicate(lambda name, score: score > 5), scores.items()))
    # [("bob", 7)]
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import spread
from .._types import BiConsumer, BiFunction, BiPredicate

type Entry[K, V] = tuple[K, V] | Iterable[K | V]


def consume[K, V](consumer: BiConsumer[K, V]) -> Callable[[Entry[K, V]], None]:
    return spread(consumer)


def predicate[K, V](test: BiPredicate[K, V]) -> Callable[[Entry[K, V]], bool]:
    return spread(test)


def function[K, V, R](fn: BiFunction[K, V, R]) -> Callable[[Entry[K, V]], R]:
    return spread(fn)


def to_dict[K, V](entries: Iterable[Entry[K, V]] | None) -> dict[K, V]:
    """Collect entries into a dict. A repeated key keeps the last value."""
    result: dict[typing.Any, typing.Any] = {}
    for key, value in entries or ():
        result[key] = value
    return result


__all__ = ("Entry", "consume", "function", "predicate", "to_dict")
