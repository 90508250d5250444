"""Lazy single-pass sequence

Thin fluent wrapper over a Cursor. Intermediate operations build a new
cursor and pull nothing; terminal operations drive the cursor to the end
(or to the first match for short-circuiting ones)."""

from __future__ import annotations

import functools
import itertools
import typing
from collections.abc import Callable, Iterator

from kungfu import Error, Ok, Result

from .._errors import EmptySequenceError, InvalidArgumentError
from .._types import Consumer, Predicate, Selector, Source
from .adapter import cursor_of
from .cursor import Cursor
from .traits import LOST_ON_COMBINE, Trait


class Lazy[T]:
    """
    Lazy, forward-only sequence of T.

    Every instance can be consumed once. Pulling again after exhaustion
    yields nothing; earlier elements are never repeated.

    Example:
        Lazy.of(3, 1, 2).filter(lambda x: x > 1).sorted().to_list()  # [2, 3]
    """

    __slots__ = ("_cursor",)

    def __init__(self, cursor: Cursor[T], /) -> None:
        self._cursor = cursor

    @classmethod
    def empty(cls) -> typing.Self:
        return cls(Cursor.empty())

    @classmethod
    def of(cls, *items: T) -> typing.Self:
        return cls(cursor_of(items))

    @property
    def cursor(self) -> Cursor[T]:
        """The underlying cursor. Pulling from it advances this sequence."""
        return self._cursor

    @property
    def size(self) -> int | None:
        """Exact number of elements left if known, otherwise None."""
        return self._cursor.remaining

    @property
    def traits(self) -> Trait:
        return self._cursor.traits

    def _derive(
        self,
        iterator: Iterator[T],
        *,
        size: int | None = None,
        traits: Trait,
    ) -> typing.Self:
        """Same element type, same wrapper class, new cursor."""
        return type(self)(Cursor(iterator, size=size, traits=traits))

    # Intermediate operations

    def map[U](self, fn: Callable[[T], U], /) -> Lazy[U]:
        return Lazy(Cursor(map(fn, self._cursor), size=self.size, traits=self.traits & ~LOST_ON_COMBINE))

    def flat_map[U](self, fn: Callable[[T], Source[U]], /) -> Lazy[U]:
        cursor = self._cursor

        def flatten() -> Iterator[U]:
            for item in cursor:
                yield from cursor_of(fn(item))

        return Lazy(Cursor(flatten(), traits=self.traits & Trait.ORDERED))

    def filter(self, predicate: Predicate[T], /) -> typing.Self:
        return self._derive(filter(predicate, self._cursor), traits=self.traits & ~Trait.SIZED)

    def peek(self, action: Consumer[T], /) -> typing.Self:
        cursor = self._cursor

        def observe() -> Iterator[T]:
            for item in cursor:
                action(item)
                yield item

        return self._derive(observe(), size=self.size, traits=self.traits)

    def distinct(self) -> typing.Self:
        """Drop repeated elements, keeping first occurrences. Elements must be hashable."""
        cursor = self._cursor

        def unique() -> Iterator[T]:
            seen: set[typing.Any] = set()
            for item in cursor:
                if item not in seen:
                    seen.add(item)
                    yield item

        return self._derive(unique(), traits=(self.traits | Trait.DISTINCT) & ~Trait.SIZED)

    def sorted(
        self,
        *,
        key: Selector[T, typing.Any] | None = None,
        reverse: bool = False,
    ) -> typing.Self:
        """
        Sort on first pull. Buffers the remaining elements at that point.

        SORTED means natural ascending order, so it is only claimed
        without `key` and `reverse`.
        """
        cursor = self._cursor

        def ordered() -> Iterator[T]:
            yield from sorted(cursor, key=key, reverse=reverse)  # type: ignore[type-var, arg-type]

        traits = (self.traits | Trait.ORDERED) & ~Trait.SORTED
        if key is None and not reverse:
            traits |= Trait.SORTED
        return self._derive(ordered(), size=self.size, traits=traits)

    def limit(self, max_size: int, /) -> typing.Self:
        if max_size < 0:
            raise InvalidArgumentError("max_size", max_size, "must be >= 0")
        size = None if self.size is None else min(self.size, max_size)
        return self._derive(itertools.islice(self._cursor, max_size), size=size, traits=self.traits)

    def skip(self, n: int, /) -> typing.Self:
        if n < 0:
            raise InvalidArgumentError("n", n, "must be >= 0")
        size = None if self.size is None else max(self.size - n, 0)
        return self._derive(itertools.islice(self._cursor, n, None), size=size, traits=self.traits)

    def take_while(self, predicate: Predicate[T], /) -> typing.Self:
        return self._derive(itertools.takewhile(predicate, self._cursor), traits=self.traits & ~Trait.SIZED)

    def drop_while(self, predicate: Predicate[T], /) -> typing.Self:
        return self._derive(itertools.dropwhile(predicate, self._cursor), traits=self.traits & ~Trait.SIZED)

    # Terminal operations

    def for_each(self, action: Consumer[T], /) -> None:
        for item in self._cursor:
            action(item)

    def to_list(self) -> list[T]:
        return list(self._cursor)

    def to_set(self) -> set[T]:
        return set(self._cursor)

    def count(self) -> int:
        return sum(1 for _ in self._cursor)

    def any_match(self, predicate: Predicate[T], /) -> bool:
        return any(predicate(item) for item in self._cursor)

    def all_match(self, predicate: Predicate[T], /) -> bool:
        return all(predicate(item) for item in self._cursor)

    def none_match(self, predicate: Predicate[T], /) -> bool:
        return not self.any_match(predicate)

    def find_first(self) -> Result[T, EmptySequenceError]:
        """First element, pulling nothing past it."""
        if self._cursor.has_next():
            return Ok(self._cursor.next())
        return Error(EmptySequenceError("find_first"))

    def reduce(self, fn: Callable[[T, T], T], /) -> Result[T, EmptySequenceError]:
        """Combine all elements left to right. Error on an empty sequence."""
        if not self._cursor.has_next():
            return Error(EmptySequenceError("reduce"))
        return Ok(functools.reduce(fn, self._cursor))

    def fold[U](self, initial: U, fn: Callable[[U, T], U], /) -> U:
        """Combine all elements left to right starting from `initial`."""
        return functools.reduce(fn, self._cursor, initial)

    def min(self, *, key: Selector[T, typing.Any] | None = None) -> Result[T, EmptySequenceError]:
        if not self._cursor.has_next():
            return Error(EmptySequenceError("min"))
        return Ok(min(self._cursor, key=key))  # type: ignore[type-var, arg-type]

    def max(self, *, key: Selector[T, typing.Any] | None = None) -> Result[T, EmptySequenceError]:
        if not self._cursor.has_next():
            return Error(EmptySequenceError("max"))
        return Ok(max(self._cursor, key=key))  # type: ignore[type-var, arg-type]

    def join(self, separator: str = "", /) -> str:
        return separator.join(str(item) for item in self._cursor)

    def __iter__(self) -> Iterator[T]:
        return self._cursor

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size!r}, traits={self.traits!r})"


__all__ = ("Lazy",)
