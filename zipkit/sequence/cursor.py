"""
Forward-only cursor
===================

Uniform pull source used by every lazy sequence and composer.

Contract:
- single pass, never restarted
- once exhausted, stays exhausted (the wrapped iterator is not touched again)
- has_next() reads at most one element ahead, and none at all when the
  remaining count is known
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._errors import NoSuchElementError
from .._helpers import MISSING
from .traits import Trait


class Cursor[T]:
    """
    Pull-based cursor over an iterator.

    `remaining` is the number of elements still to come when known,
    otherwise None. `traits` are the hints inherited from the source.
    """

    __slots__ = ("_iterator", "_buffer", "_exhausted", "_remaining", "_traits")

    def __init__(
        self,
        iterator: Iterator[T],
        /,
        *,
        size: int | None = None,
        traits: Trait = Trait.NONE,
    ) -> None:
        self._iterator = iterator
        self._buffer: typing.Any = MISSING
        self._exhausted = size == 0
        self._remaining = size
        if size is None:
            traits &= ~Trait.SIZED
        else:
            traits |= Trait.SIZED
        self._traits = traits

    @staticmethod
    def empty() -> Cursor[typing.Any]:
        """Cursor with zero elements, already exhausted."""
        return Cursor(iter(()), size=0, traits=Trait.ORDERED)

    @property
    def remaining(self) -> int | None:
        """Known number of elements left, or None."""
        return self._remaining

    @property
    def traits(self) -> Trait:
        return self._traits

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def has_next(self) -> bool:
        if self._exhausted:
            return False
        if self._buffer is not MISSING:
            return True
        if self._remaining is not None:
            return self._remaining > 0
        try:
            self._buffer = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def next(self) -> T:
        """
        Take the next element.

        Raises NoSuchElementError when nothing is left.
        """
        if self._exhausted:
            raise NoSuchElementError()

        if self._buffer is not MISSING:
            value = self._buffer
            self._buffer = MISSING
        else:
            try:
                value = next(self._iterator)
            except StopIteration:
                self._finish()
                raise NoSuchElementError() from None

        if self._remaining is not None:
            self._remaining -= 1
            if self._remaining <= 0:
                self._finish()
        return value

    def _finish(self) -> None:
        self._exhausted = True
        self._remaining = 0
        self._buffer = MISSING

    # Iterator protocol

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        try:
            return self.next()
        except NoSuchElementError:
            # Known size overstated the source (e.g. shrunk while pending)
            raise StopIteration from None

    def __repr__(self) -> str:
        return f"Cursor(remaining={self._remaining!r}, traits={self._traits!r}, exhausted={self._exhausted})"


__all__ = ("Cursor",)
