"""
Argument guards.

Naming:
- check_*: validate and raise on failure
- is_*: validate and return bool
"""

from __future__ import annotations

import typing

from ._errors import NullValueError


def check_not_none[T](value: T | None, message: str | None = None, *args: typing.Any) -> T:
    """
    Return value unchanged, or raise NullValueError when it is None.

    `message` may hold `{}` placeholders filled from `args`.

    Example:
        check_not_none(key, "Key provider for {} must not be None.", "users")
    """
    if value is None:
        if message is None:
            raise NullValueError()
        from .text.strings import format as format_message

        raise NullValueError(format_message(message, *args))
    return value


def is_any_none(*values: typing.Any) -> bool:
    return any(value is None for value in values)


def is_all_none(*values: typing.Any) -> bool:
    return all(value is None for value in values)


def is_none_none(*values: typing.Any) -> bool:
    return not is_any_none(*values)


__all__ = ("check_not_none", "is_all_none", "is_any_none", "is_none_none")
