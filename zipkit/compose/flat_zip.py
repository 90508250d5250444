"""
Flat zip composers
==================

Pair every outer element with each element of the inner sequence
generated from it, in outer-then-inner order.

State machine (FlatZipCursor):

    PRIMING ──first outer──> YIELDING <──────────┐
       │                        │ inner empty     │ outer has next
       │ outer empty            v                 │
       └──────────────> DONE <── ADVANCING ───────┘
                               outer exhausted
"""

from __future__ import annotations

import enum
import logging
import typing
from collections.abc import Iterator

from .._errors import NoSuchElementError
from .._types import InnerSource, Source, Zipper
from ..collection.common import is_empty
from ..pairs import Couple, CoupleStream
from ..sequence import Cursor, Lazy, Trait, cursor_of

logger = logging.getLogger(__name__)


class FlatZipState(enum.Enum):
    PRIMING = "priming"
    YIELDING = "yielding"
    ADVANCING = "advancing"
    DONE = "done"


class FlatZipCursor[X, Y]:
    """
    Outer/inner traversal held as explicit state.

    The generator runs once per outer element, only when the previous
    inner cursor is used up. Empty inner sequences are skipped in a loop,
    so memory stays flat however many of them come in a row.
    """

    __slots__ = ("_outer", "_generator", "_state", "_current", "_inner")

    def __init__(self, outer: Cursor[X], generator: InnerSource[X, Y]) -> None:
        self._outer = outer
        self._generator = generator
        self._state = FlatZipState.PRIMING
        self._current: typing.Any = None
        self._inner: Cursor[Y] = Cursor.empty()
        self._prime()

    @property
    def state(self) -> FlatZipState:
        return self._state

    def _prime(self) -> None:
        if self._outer.has_next():
            self._load(self._outer.next())
        else:
            self._state = FlatZipState.DONE

    def _load(self, outer_item: X) -> None:
        self._current = outer_item
        self._inner = cursor_of(self._generator(outer_item))
        self._state = FlatZipState.YIELDING

    def has_next(self) -> bool:
        while True:
            match self._state:
                case FlatZipState.YIELDING:
                    if self._inner.has_next():
                        return True
                    self._state = FlatZipState.ADVANCING
                case FlatZipState.ADVANCING:
                    if self._outer.has_next():
                        self._load(self._outer.next())
                        if not self._inner.has_next():
                            logger.debug("flat_zip: empty inner sequence for %r, skipping", self._current)
                    else:
                        self._state = FlatZipState.DONE
                case FlatZipState.DONE:
                    return False
                case FlatZipState.PRIMING:
                    self._prime()

    def next(self) -> tuple[X, Y]:
        """Next (outer, inner) combination. Raises NoSuchElementError when done."""
        if not self.has_next():
            raise NoSuchElementError()
        return self._current, self._inner.next()

    def __iter__(self) -> Iterator[tuple[X, Y]]:
        while self.has_next():
            yield self.next()


# ============================================================================
# Generic composer
# ============================================================================


def flat_zip_with[X, Y, U](
    outer: Source[X],
    generator: InnerSource[X, Y],
    *,
    zipper: Zipper[X, Y, U],
) -> Lazy[U]:
    """
    Flat zip with a custom combining function.

    Example:
        flat_zip_with(["ab", "c"], list, zipper=lambda word, ch: f"{word}:{ch}").to_list()
        # ["ab:a", "ab:b", "c:c"]
    """
    if is_empty(outer):
        return Lazy.empty()

    outer_cursor: Cursor[X] = cursor_of(outer)
    logger.debug("flat_zip: outer size=%s", outer_cursor.remaining)
    pairs = FlatZipCursor(outer_cursor, generator)
    combined = (zipper(left, right) for left, right in pairs)
    # Result size depends on every inner sequence: never known up front
    return Lazy(Cursor(combined, traits=Trait.ORDERED))


# ============================================================================
# Sugar for CoupleStream
# ============================================================================


def flat_zip[X, Y](outer: Source[X], generator: InnerSource[X, Y]) -> CoupleStream[X, Y]:
    """
    Pair each outer element with every element generated from it.

    An outer element whose generated sequence is empty (or None)
    contributes nothing.

    Example:
        items = [{"x": 5, "y": [1, 2, 3]}, {"x": 3, "y": [1]}, {"x": 2, "y": []}]
        flat_zip(items, lambda item: item["y"]).map_bi(lambda item, y: (item["x"], y)).to_list()
        # [(5, 1), (5, 2), (5, 3), (3, 1)]
    """
    return CoupleStream(flat_zip_with(outer, generator, zipper=Couple).cursor)


__all__ = ("FlatZipCursor", "FlatZipState", "flat_zip", "flat_zip_with")
