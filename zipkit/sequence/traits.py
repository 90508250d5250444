"""
Sequence traits
===============

Size and ordering hints carried by a cursor. Composers combine them
and must never claim a trait the result cannot guarantee.
"""

from __future__ import annotations

import array
import enum
import typing
from collections import deque
from collections.abc import Iterator, KeysView, Sequence, Set, Sized


class Trait(enum.Flag):
    """Metadata flags of a sequence."""

    NONE = 0
    ORDERED = enum.auto()
    DISTINCT = enum.auto()
    SORTED = enum.auto()
    SIZED = enum.auto()


# Pairing two sequences never yields distinct or sorted pairs as a whole
LOST_ON_COMBINE = Trait.DISTINCT | Trait.SORTED


def traits_of(source: typing.Any) -> Trait:
    """
    Derive traits from the type of a source.

    Iterators are checked first: they are single-pass and their length
    is never known up front.
    """
    if source is None:
        return Trait.ORDERED | Trait.SIZED
    if isinstance(source, Iterator):
        return Trait.ORDERED
    if isinstance(source, range):
        traits = Trait.ORDERED | Trait.SIZED | Trait.DISTINCT
        if source.step > 0:
            traits |= Trait.SORTED
        return traits
    if isinstance(source, dict):
        return Trait.ORDERED | Trait.DISTINCT | Trait.SIZED
    if isinstance(source, (Set, KeysView)):
        return Trait.DISTINCT | Trait.SIZED
    if isinstance(source, (Sequence, array.array, deque)):
        return Trait.ORDERED | Trait.SIZED
    if isinstance(source, Sized):
        return Trait.SIZED
    return Trait.NONE


def combine(left: Trait, right: Trait) -> Trait:
    """Traits of a sequence built from two others, element by element."""
    return left & right & ~LOST_ON_COMBINE


__all__ = ("LOST_ON_COMBINE", "Trait", "combine", "traits_of")
