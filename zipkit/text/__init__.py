"""
String helpers.

Usage:
    from zipkit.text import strings as S

    S.between("(", ")", "f(a)")  # "a"
    S.join(", ", ["a", None])    # "a"
"""

from . import strings
from .strings import EMPTY, hidden_text_of, is_blank, is_not_blank

__all__ = ("EMPTY", "hidden_text_of", "is_blank", "is_not_blank", "strings")
