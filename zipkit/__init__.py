"""
zipkit - null-tolerant helpers and lazy paired-sequence composition.

Core building blocks for pairing sequences without materializing them,
plus small None-safe helpers for lists, sets, maps and strings.

Architecture:
- sequence: Cursor (pull source), adapter (any source -> Cursor), Lazy (fluent single-pass sequence)
- pairs: Couple (immutable pair) and CoupleStream (Lazy with two-argument map/filter/for_each)
- compose: zip_* and flat_zip* composers (generic *_with forms take a zipper function)
- collection / text / guard: None-safe helpers
"""

import logging

# Core types
from ._types import BiConsumer, BiFunction, BiPredicate, Consumer, Predicate, Selector, Source, Zipper

# Errors
from ._errors import (
    EmptySequenceError,
    IndexLookupError,
    InvalidArgumentError,
    NoSuchElementError,
    NullValueError,
)

# Sequences
from .sequence import Cursor, Lazy, Trait, cursor_of, stream_of

# Pairs
from .pairs import Couple, CoupleStream

# Composers
from .compose import (
    # CoupleStream
    flat_zip,
    zip_broadcast,
    zip_mapped,
    zip_pairs,
    # Generic
    flat_zip_with,
    zip_with,
)

# Helpers (namespaces)
from . import collection, guard, text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "BiConsumer",
    "BiFunction",
    "BiPredicate",
    "Consumer",
    "Predicate",
    "Selector",
    "Source",
    "Zipper",
    # Errors
    "EmptySequenceError",
    "IndexLookupError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "NullValueError",
    # Sequences
    "Cursor",
    "Lazy",
    "Trait",
    "cursor_of",
    "stream_of",
    # Pairs
    "Couple",
    "CoupleStream",
    # Composers
    "flat_zip",
    "flat_zip_with",
    "zip_broadcast",
    "zip_mapped",
    "zip_pairs",
    "zip_with",
    # Namespaces
    "collection",
    "guard",
    "text",
)
