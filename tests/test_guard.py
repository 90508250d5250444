from __future__ import annotations

import pytest

from zipkit import NullValueError
from zipkit.guard import check_not_none, is_all_none, is_any_none, is_none_none


class TestCheckNotNone:
    """check_not_none"""

    def test_returns_value(self):
        value = [1]
        assert check_not_none(value) is value
        assert check_not_none(0) == 0
        assert check_not_none("") == ""

    def test_default_message(self):
        with pytest.raises(NullValueError, match="Value must be not None."):
            check_not_none(None)

    def test_formatted_message(self):
        with pytest.raises(NullValueError) as info:
            check_not_none(None, "Key provider for {} must not be None.", "users")
        assert str(info.value) == "Key provider for users must not be None."

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            check_not_none(None)


class TestNoneChecks:
    """is_*_none over varargs"""

    def test_any(self):
        assert is_any_none(1, None)
        assert not is_any_none(1, 2)
        assert not is_any_none()

    def test_all(self):
        assert is_all_none(None, None)
        assert not is_all_none(None, 1)

    def test_none_none(self):
        assert is_none_none(1, "a", 0)
        assert not is_none_none(1, None)
