"""
Zip composers
=============

Pair two sources element by element. The shorter source decides the
length; nothing past its end is ever yielded.
"""

from __future__ import annotations

import itertools
import logging
import typing
from collections.abc import Callable, Iterator

from .._types import Source, Zipper
from ..pairs import Couple, CoupleStream
from ..sequence import Cursor, Lazy, Trait, combine, cursor_of

logger = logging.getLogger(__name__)


# ============================================================================
# Generic composer
# ============================================================================


def zip_cursor[L, R, U](
    left: Cursor[L],
    right: Cursor[R],
    zipper: Zipper[L, R, U],
) -> Cursor[U]:
    """
    Drive two cursors in lockstep.

    A side with a known count is asked first: it answers without reading,
    so the other side is never read past the shorter end. Only when both
    sides are unsized is the left one asked first, and it may then buffer
    one element that is never yielded. Distinct/sorted hints are always
    dropped.
    """
    traits = combine(left.traits, right.traits)
    size: int | None = None
    if Trait.SIZED in traits and left.remaining is not None and right.remaining is not None:
        size = min(left.remaining, right.remaining)

    logger.debug("zip: left=%s right=%s -> size=%s", left.remaining, right.remaining, size)

    first: Cursor[typing.Any] = left
    second: Cursor[typing.Any] = right
    if left.remaining is None and right.remaining is not None:
        first, second = right, left

    def pairs() -> Iterator[U]:
        while first.has_next() and second.has_next():
            yield zipper(left.next(), right.next())

    return Cursor(pairs(), size=size, traits=traits)


def zip_with[L, R, U](
    left: Source[L],
    right: Source[R],
    *,
    zipper: Zipper[L, R, U],
) -> Lazy[U]:
    """
    Zip two sources with a custom combining function.

    Example:
        zip_with([1, 2, 3], [10, 20], zipper=lambda a, b: a + b).to_list()  # [11, 22]
    """
    if left is None or right is None:
        return Lazy.empty()
    return Lazy(zip_cursor(cursor_of(left), cursor_of(right), zipper))


# ============================================================================
# Sugar for CoupleStream
# ============================================================================


def zip_pairs[K, V](keys: Source[K], values: Source[V]) -> CoupleStream[K, V]:
    """
    Pair items at the same position.

    Example:
        zip_pairs([1, 2, 3], ["A", "B", "C"]).to_list()
        # [Couple(1, "A"), Couple(2, "B"), Couple(3, "C")]
    """
    if keys is None or values is None:
        return CoupleStream.empty()
    return CoupleStream(zip_cursor(cursor_of(keys), cursor_of(values), Couple))


def zip_mapped[K, V](keys: Source[K], mapper: Callable[[K], V]) -> CoupleStream[K, V]:
    """
    Pair every key with a value derived from it.

    Values are computed eagerly, once per key, before pairing.
    A one-shot key source (iterator, generator, Lazy) is read into a list first.

    Example:
        zip_mapped([(1, 2), (3, 4)], lambda t: t[1]).to_list()
        # [Couple((1, 2), 2), Couple((3, 4), 4)]
    """
    if keys is None:
        return CoupleStream.empty()
    key_source = list(cursor_of(keys)) if isinstance(keys, (Iterator, Lazy)) else keys
    values = [mapper(key) for key in key_source]
    return zip_pairs(key_source, values)


def zip_broadcast[K, V](key: K | None, values: Source[V]) -> CoupleStream[K, V]:
    """
    Pair one fixed key with every value.

    A None key gives an empty stream whatever the values are.

    Example:
        zip_broadcast(5, [1, 2, 3]).to_list()
        # [Couple(5, 1), Couple(5, 2), Couple(5, 3)]
    """
    if key is None or values is None:
        return CoupleStream.empty()
    value_cursor: Cursor[V] = cursor_of(values)
    count = value_cursor.remaining
    repeated = itertools.repeat(key) if count is None else itertools.repeat(key, count)
    key_cursor: Cursor[K] = Cursor(repeated, size=count, traits=Trait.ORDERED)
    # Values drive the pull: the key is repeated only for a value already read
    return CoupleStream(zip_cursor(value_cursor, key_cursor, lambda value, same_key: Couple(same_key, value)))


__all__ = ("zip_broadcast", "zip_cursor", "zip_mapped", "zip_pairs", "zip_with")
