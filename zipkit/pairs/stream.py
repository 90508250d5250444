"""CoupleStream

Lazy sequence of Couple values with two-argument forms of map, filter
and for_each. Everything else behaves like Lazy on whole pairs."""

from __future__ import annotations

from collections.abc import Mapping

from .._helpers import spread
from .._types import BiConsumer, BiFunction, BiPredicate
from ..sequence import Cursor, Lazy, Trait, cursor_of
from .couple import Couple


class CoupleStream[X, Y](Lazy[Couple[X, Y]]):
    """
    Paired-sequence facade.

    Example:
        stream = zip_pairs([1, 2, 3], ["A", "B", "C"])
        stream.filter_bi(lambda n, s: n != 2).map_bi(lambda n, s: f"{s}{n}").to_list()
        # ["A1", "C3"]
    """

    __slots__ = ()

    @classmethod
    def from_mapping[K, V](cls, mapping: Mapping[K, V] | None, /) -> CoupleStream[K, V]:
        """Stream of (key, value) couples in mapping iteration order."""
        if mapping is None:
            return CoupleStream.empty()
        items = cursor_of(mapping.items())
        pairs = (Couple(key, value) for key, value in items)
        return CoupleStream(Cursor(pairs, size=items.remaining, traits=Trait.ORDERED | Trait.DISTINCT))

    # Two-argument forms

    def map_bi[U](self, fn: BiFunction[X, Y, U], /) -> Lazy[U]:
        """Apply fn(left, right) to every pair."""
        return self.map(spread(fn))

    def filter_bi(self, predicate: BiPredicate[X, Y], /) -> CoupleStream[X, Y]:
        """Keep pairs for which predicate(left, right) holds."""
        return self.filter(spread(predicate))

    def for_each_bi(self, consumer: BiConsumer[X, Y], /) -> None:
        """Call consumer(left, right) for every pair, in order, until exhausted."""
        self.for_each(spread(consumer))

    # Projections

    def lefts(self) -> Lazy[X]:
        return self.map(lambda pair: pair.left)

    def rights(self) -> Lazy[Y]:
        return self.map(lambda pair: pair.right)

    def swapped(self) -> CoupleStream[Y, X]:
        return CoupleStream(Cursor(map(Couple.swap, self.cursor), size=self.size, traits=self.traits & ~Trait.SORTED))

    def to_dict(self) -> dict[X, Y]:
        """Collect into a dict. A repeated left value keeps the last right value."""
        return {pair.left: pair.right for pair in self.cursor}


__all__ = ("CoupleStream",)
