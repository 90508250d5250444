"""
Sequence adapter
================

Normalizes every supported source into a Cursor:
- None -> empty cursor
- Cursor -> itself, Lazy -> its cursor (metadata kept)
- iterator / generator -> consumed in place, size unknown
- collection / array / other iterable -> iter(source), size from len()
"""

from __future__ import annotations

import typing
from collections.abc import Iterator, Sized

from .._types import Source
from .cursor import Cursor
from .traits import traits_of

if typing.TYPE_CHECKING:
    from .lazy import Lazy


def cursor_of[T](source: Source[T]) -> Cursor[T]:
    """
    Build a lazy cursor over a source. Nothing is read until pulled.

    Example:
        cursor_of([1, 2]).remaining      # 2
        cursor_of(None).has_next()       # False
        cursor_of(iter("ab")).remaining  # None
    """
    if source is None:
        return Cursor.empty()
    if isinstance(source, Cursor):
        return source

    from .lazy import Lazy

    if isinstance(source, Lazy):
        return source.cursor
    traits = traits_of(source)
    if isinstance(source, Iterator):
        return Cursor(source, traits=traits)
    size = len(source) if isinstance(source, Sized) else None
    return Cursor(iter(source), size=size, traits=traits)


def stream_of[T](source: Source[T]) -> Lazy[T]:
    """Wrap any source in a lazy single-pass sequence."""
    from .lazy import Lazy

    return Lazy(cursor_of(source))


__all__ = ("cursor_of", "stream_of")
