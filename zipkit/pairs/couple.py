"""
Couple - immutable ordered pair
===============================
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Couple[L, R]:
    """
    Two-slot value produced by the zip composers.

    Equality, hashing and ordering are structural over (left, right).
    Either slot may hold None.

    Example:
        pair = Couple.of(1, "A")
        str(pair)            # "1 - A"
        left, right = pair   # unpacks like a 2-tuple
    """

    left: L
    right: R

    @staticmethod
    def of[A, B](left: A, right: B) -> Couple[A, B]:
        return Couple(left, right)

    def swap(self) -> Couple[R, L]:
        return Couple(self.right, self.left)

    def __iter__(self) -> Iterator[L | R]:
        yield self.left
        yield self.right

    def __str__(self) -> str:
        return f"{self.left} - {self.right}"


__all__ = ("Couple",)
