"""
Core type definitions for zipkit.

Type aliases used across the library.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

# ============================================================================
# Single-argument callables
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for comparison/sorting
type Selector[T, K] = Callable[[T], K]

# Consumer = function called for its side effect only
type Consumer[T] = Callable[[T], None]

# ============================================================================
# Two-argument callables (applied to both slots of a pair)
# ============================================================================

type BiPredicate[L, R] = Callable[[L, R], bool]

type BiFunction[L, R, U] = Callable[[L, R], U]

type BiConsumer[L, R] = Callable[[L, R], None]

# Zipper = function that merges one left and one right element
type Zipper[L, R, U] = Callable[[L, R], U]

# ============================================================================
# Sources
# ============================================================================

# Source = anything the sequence adapter accepts. None means "empty".
# NOTE: Iterators and generators are included: Iterator is an Iterable.
type Source[T] = Iterable[T] | None

# Generator used by flat zip: outer element -> inner source
type InnerSource[X, Y] = Callable[[X], Source[Y]]

__all__ = (
    "Predicate",
    "Selector",
    "Consumer",
    "BiPredicate",
    "BiFunction",
    "BiConsumer",
    "Zipper",
    "Source",
    "InnerSource",
)
