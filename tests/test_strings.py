from __future__ import annotations

import pytest

from zipkit import InvalidArgumentError, NullValueError
from zipkit.text import strings


class TestChecks:
    """Emptiness and equality"""

    @pytest.mark.parametrize(
        ("value", "empty", "blank"),
        [
            (None, True, True),
            ("", True, True),
            ("   ", False, True),
            ("\t\n", False, True),
            (" a ", False, False),
        ],
    )
    def test_empty_and_blank(self, value, empty, blank):
        assert strings.is_empty(value) is empty
        assert strings.is_not_empty(value) is not empty
        assert strings.is_blank(value) is blank
        assert strings.is_not_blank(value) is not blank

    def test_empty_if_none_and_length(self):
        assert strings.empty_if_none(None) == ""
        assert strings.empty_if_none("x") == "x"
        assert strings.length_of(None) == 0
        assert strings.length_of("abc") == 3

    def test_is_equals_none_never_equal(self):
        assert strings.is_equals("a", "a")
        assert not strings.is_equals(None, None)
        assert not strings.is_equals("a", None)

    def test_character_matches(self):
        assert strings.all_characters_match(str.isdigit, "123")
        assert not strings.all_characters_match(str.isdigit, "12a")
        assert strings.any_characters_match(str.isalpha, "12a")
        assert strings.no_characters_match(str.isalpha, "123")

    def test_character_matches_on_blank_are_false(self):
        assert not strings.all_characters_match(str.isspace, "   ")
        assert not strings.no_characters_match(str.isalpha, None)

    def test_character_matches_need_predicate(self):
        with pytest.raises(NullValueError):
            strings.any_characters_match(None, "abc")  # type: ignore[arg-type]


class TestSubstrings:
    """before/after/between extraction"""

    TEXT = "hello world."

    def test_before(self):
        assert strings.before_of("o", self.TEXT) == "hell"
        assert strings.before_of_including("o", self.TEXT) == "hello"
        assert strings.before_last_of("o", self.TEXT) == "hello w"
        assert strings.before_last_of_including("o", self.TEXT) == "hello wo"

    def test_after(self):
        assert strings.after_of("o", self.TEXT) == " world."
        assert strings.after_of_including("o", self.TEXT) == "o world."
        assert strings.after_last_of("o", self.TEXT) == "rld."
        assert strings.after_last_of_including("o", self.TEXT) == "orld."

    def test_missing_word_gives_empty(self):
        assert strings.before_of("z", self.TEXT) == ""
        assert strings.after_last_of("z", self.TEXT) == ""
        assert strings.after_of(None, self.TEXT) == ""
        assert strings.before_of("o", None) == ""

    def test_empty_word_after_returns_parent(self):
        assert strings.after_of("", "abc") == "abc"

    def test_between_variants(self):
        assert strings.between("(", ")", "f(a)(b)") == "a"
        assert strings.between_last_of("(", ")", "f(a)(b)") == "b"
        assert strings.largest_between("(", ")", "f(a)(b)") == "a)(b"

    def test_between_open_ended(self):
        assert strings.between("", ")", "f(a)") == "f(a"
        assert strings.between("(", None, "f(a)") == "a)"
        assert strings.between(None, None, "f(a)") == "f(a)"
        assert strings.between("(", ")", None) == ""

    def test_between_empty_words_and_parent(self):
        assert strings.between("", "", "abc") == "abc"
        assert strings.largest_between("(", ")", "") == ""

    def test_between_end_before_start(self):
        assert strings.between("(", ")", ")x(") == ""


class TestBuilding:
    """format, concat, join and masking"""

    def test_format_sequential(self):
        assert strings.format("My name is {}.", "Ann") == "My name is Ann."
        assert strings.format("{} + {} = {}", 1, 2) == "1 + 2 = {}"
        assert strings.format("no placeholders", "extra") == "no placeholders"

    def test_format_indexed(self):
        assert strings.format("{1}-{0}", "a", "b") == "b-a"

    def test_format_none(self):
        assert strings.format(None, 1) == ""

    def test_concat(self):
        assert strings.concat("a", None, 1) == "aNone1"
        assert strings.concat_non_null("a", None, 1) == "a1"

    def test_join(self):
        assert strings.join(", ", ["a", None, 1]) == "a, 1"
        assert strings.join(None, ["a", "b"]) == "ab"
        assert strings.join(",", None) == ""

    @pytest.mark.parametrize(
        ("value", "args", "expected"),
        [
            ("1234567890", (8, 1), "1*********"),
            ("123456", (), "********"),
            (None, (), "********"),
            ("12345678", (8, 3), "********"),
            ("123456789", (), "123******"),
            ("abc", (0, 0), "***"),
        ],
    )
    def test_hidden_text_of(self, value, args, expected):
        assert strings.hidden_text_of(value, *args) == expected

    def test_hidden_text_rejects_negative_lengths(self):
        with pytest.raises(InvalidArgumentError) as info:
            strings.hidden_text_of("secret", -1)
        assert info.value.argument == "min_length"
        with pytest.raises(InvalidArgumentError):
            strings.hidden_text_of(None, 8, -1)
