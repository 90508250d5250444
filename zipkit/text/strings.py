"""
Null-safe string helpers.

Functions never return None: a missing input or a missing match gives
the empty string. Substring extraction does not treat blank words specially.
"""

from __future__ import annotations

import re
import typing
from collections.abc import Iterable

from .._errors import InvalidArgumentError
from .._types import Predicate
from ..guard import check_not_none

EMPTY = ""

SECURITY_CHAR = "*"
SECURITY_MIN_LENGTH = 8
SECURITY_HINT_LENGTH = 3

_INDEXED_PLACEHOLDER = re.compile(r"\{\d")


# ============================================================================
# Checks
# ============================================================================


def is_empty(value: str | None) -> bool:
    return value is None or value == EMPTY


def is_not_empty(value: str | None) -> bool:
    return not is_empty(value)


def is_blank(value: str | None) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def is_not_blank(value: str | None) -> bool:
    return not is_blank(value)


def empty_if_none(value: str | None) -> str:
    return EMPTY if value is None else value


def length_of(value: str | None) -> int:
    return 0 if value is None else len(value)


def is_equals(value: str | None, other: str | None) -> bool:
    """False when either side is None."""
    return value is not None and value == other


def all_characters_match(predicate: Predicate[str], value: str | None) -> bool:
    check_not_none(predicate, "Predicate should not be None.")
    return is_not_blank(value) and all(predicate(char) for char in value)  # type: ignore[union-attr]


def any_characters_match(predicate: Predicate[str], value: str | None) -> bool:
    check_not_none(predicate, "Predicate should not be None.")
    return is_not_blank(value) and any(predicate(char) for char in value)  # type: ignore[union-attr]


def no_characters_match(predicate: Predicate[str], value: str | None) -> bool:
    check_not_none(predicate, "Predicate should not be None.")
    return is_not_blank(value) and not any(predicate(char) for char in value)  # type: ignore[union-attr]


# ============================================================================
# Substring extraction
# ============================================================================


def before_of(word: str | None, parent: str | None) -> str:
    """
    Text before the first occurrence of word.

    Example:
        before_of("o", "hello world.")  # "hell"
    """
    if word is None or parent is None:
        return EMPTY
    index = parent.find(word)
    return EMPTY if index < 0 else parent[:index]


def before_of_including(word: str | None, parent: str | None) -> str:
    """before_of("o", "hello world.") + "o" -> "hello"."""
    if word is None or parent is None:
        return EMPTY
    index = parent.find(word)
    return EMPTY if index < 0 else parent[: index + len(word)]


def before_last_of(word: str | None, parent: str | None) -> str:
    if word is None or parent is None:
        return EMPTY
    index = parent.rfind(word)
    return EMPTY if index < 0 else parent[:index]


def before_last_of_including(word: str | None, parent: str | None) -> str:
    if word is None or parent is None:
        return EMPTY
    index = parent.rfind(word)
    return EMPTY if index < 0 else parent[: index + len(word)]


def after_of(word: str | None, parent: str | None) -> str:
    """
    Text after the first occurrence of word. An empty word returns parent.

    Example:
        after_of("o", "hello world.")  # " world."
    """
    if word is None or parent is None:
        return EMPTY
    if word == EMPTY:
        return parent
    index = parent.find(word)
    return EMPTY if index < 0 else parent[index + len(word) :]


def after_of_including(word: str | None, parent: str | None) -> str:
    """after_of_including("o", "hello world.") -> "o world."."""
    if word is None or parent is None:
        return EMPTY
    if word == EMPTY:
        return parent
    index = parent.find(word)
    return EMPTY if index < 0 else parent[index:]


def after_last_of(word: str | None, parent: str | None) -> str:
    if word is None or parent is None:
        return EMPTY
    if word == EMPTY:
        return parent
    index = parent.rfind(word)
    return EMPTY if index < 0 else parent[index + len(word) :]


def after_last_of_including(word: str | None, parent: str | None) -> str:
    if word is None or parent is None:
        return EMPTY
    if word == EMPTY:
        return parent
    index = parent.rfind(word)
    return EMPTY if index < 0 else parent[index:]


def _between(
    start: str | None,
    end: str | None,
    parent: str | None,
    *,
    start_from_last: bool,
    end_from_last: bool,
) -> str:
    if not parent:
        return EMPTY
    if not start and not end:
        return parent
    if not start:
        return before_of(end, parent)
    if not end:
        return after_of(start, parent)

    start_index = parent.rfind(start) if start_from_last else parent.find(start)
    if start_index < 0:
        return EMPTY
    end_index = parent.rfind(end) if end_from_last else parent.find(end)
    if end_index < 0:
        return EMPTY
    content_start = start_index + len(start)
    if content_start >= end_index:
        return EMPTY
    return parent[content_start:end_index]


def between(start: str | None, end: str | None, parent: str | None) -> str:
    """
    Text between the first start and the first end.

    Example:
        between("(", ")", "f(a)(b)")  # "a"
    """
    return _between(start, end, parent, start_from_last=False, end_from_last=False)


def between_last_of(start: str | None, end: str | None, parent: str | None) -> str:
    """between_last_of("(", ")", "f(a)(b)") -> "b"."""
    return _between(start, end, parent, start_from_last=True, end_from_last=True)


def largest_between(start: str | None, end: str | None, parent: str | None) -> str:
    """largest_between("(", ")", "f(a)(b)") -> "a)(b"."""
    return _between(start, end, parent, start_from_last=False, end_from_last=True)


# ============================================================================
# Building
# ============================================================================


def format(pattern: str | None, *args: typing.Any) -> str:
    """
    Fill placeholders in pattern.

    `{}` placeholders are filled in order; surplus placeholders stay as
    they are, surplus arguments are ignored. Patterns with indexed
    placeholders (`{0}`, `{1:>4}`) go through str.format.

    Example:
        format("My name is {}.", "Ann")  # "My name is Ann."
        format("{1}-{0}", "a", "b")      # "b-a"
    """
    if pattern is None:
        return EMPTY
    if "{}" not in pattern and _INDEXED_PLACEHOLDER.search(pattern):
        return pattern.format(*args)

    parts = pattern.split("{}")
    filled = [parts[0]]
    for index, part in enumerate(parts[1:]):
        filled.append(str(args[index]) if index < len(args) else "{}")
        filled.append(part)
    return EMPTY.join(filled)


def concat(*words: typing.Any) -> str:
    """Concatenate str() of every word, None included."""
    return EMPTY.join(str(word) for word in words)


def concat_non_null(*words: typing.Any) -> str:
    return EMPTY.join(str(word) for word in words if word is not None)


def join(delimiter: str | None, words: Iterable[typing.Any] | None) -> str:
    """
    Join the non-None words. A None delimiter means "".

    Example:
        join(", ", ["a", None, 1])  # "a, 1"
    """
    if words is None:
        return EMPTY
    return empty_if_none(delimiter).join(str(word) for word in words if word is not None)


def hidden_text_of(
    value: str | None,
    min_length: int = SECURITY_MIN_LENGTH,
    hint_length: int = SECURITY_HINT_LENGTH,
) -> str:
    """
    Mask value with SECURITY_CHAR, keeping the first `hint_length` chars.

    Inputs no longer than `min_length` (and None) become exactly
    `min_length` mask chars.

    Example:
        hidden_text_of("1234567890", 8, 1)  # "1*********"
        hidden_text_of("123456")            # "********"
    """
    if min_length < 0:
        raise InvalidArgumentError("min_length", min_length, "must be >= 0")
    if hint_length < 0:
        raise InvalidArgumentError("hint_length", hint_length, "must be >= 0")
    if value is None or len(value) <= min_length:
        return SECURITY_CHAR * min_length
    hint = value[:hint_length]
    return hint + SECURITY_CHAR * (len(value) - len(hint))


__all__ = (
    "EMPTY",
    "SECURITY_CHAR",
    "SECURITY_HINT_LENGTH",
    "SECURITY_MIN_LENGTH",
    "after_last_of",
    "after_last_of_including",
    "after_of",
    "after_of_including",
    "all_characters_match",
    "any_characters_match",
    "before_last_of",
    "before_last_of_including",
    "before_of",
    "before_of_including",
    "between",
    "between_last_of",
    "concat",
    "concat_non_null",
    "empty_if_none",
    "format",
    "hidden_text_of",
    "is_blank",
    "is_empty",
    "is_equals",
    "is_not_blank",
    "is_not_empty",
    "join",
    "largest_between",
    "length_of",
    "no_characters_match",
)
