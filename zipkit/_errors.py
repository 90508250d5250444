from __future__ import annotations

import typing


class NoSuchElementError(LookupError):
    """Cursor pulled after it was exhausted."""

    def __init__(self) -> None:
        super().__init__("No more elements")


class EmptySequenceError(LookupError):
    """Terminal lookup (find_first, min, max, reduce) ran over an empty sequence."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() on an empty sequence")


class IndexLookupError(LookupError):
    """No element at the requested list index."""

    index: int
    size: int

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No element at index {index} (size {size})")


class InvalidArgumentError(ValueError):
    """Argument outside its accepted range."""

    argument: str
    value: typing.Any

    def __init__(self, argument: str, value: typing.Any, reason: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument}={value!r}: {reason}")


class NullValueError(ValueError):
    """Required value was None."""

    def __init__(self, message: str = "Value must be not None.") -> None:
        super().__init__(message)


__all__ = (
    "EmptySequenceError",
    "IndexLookupError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "NullValueError",
)
