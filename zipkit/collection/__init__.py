from . import entries
from .common import is_empty, is_not_empty, size_of
from .lists import (
    concat,
    different,
    element_at,
    empty_list_if_none,
    find_element_at,
    find_first_of,
    find_last_of,
    first_index_match,
    first_of,
    in_both,
    in_left_only,
    in_right_only,
    last_index_match,
    last_of,
    list_of,
    merge,
    move_element_to,
    move_element_to_head,
    move_element_to_tail,
    non_null_list_of,
)
from .maps import empty_map_if_none, map_of, non_null_map_of
from .sets import (
    empty_set_if_none,
    linked_set_of,
    non_null_linked_set_of,
    non_null_set_of,
    set_of,
    sorted_set_of,
)

__all__ = (
    # Common
    "is_empty",
    "is_not_empty",
    "size_of",
    # Lists
    "concat",
    "different",
    "element_at",
    "empty_list_if_none",
    "find_element_at",
    "find_first_of",
    "find_last_of",
    "first_index_match",
    "first_of",
    "in_both",
    "in_left_only",
    "in_right_only",
    "last_index_match",
    "last_of",
    "list_of",
    "merge",
    "move_element_to",
    "move_element_to_head",
    "move_element_to_tail",
    "non_null_list_of",
    # Sets
    "empty_set_if_none",
    "linked_set_of",
    "non_null_linked_set_of",
    "non_null_set_of",
    "set_of",
    "sorted_set_of",
    # Maps
    "empty_map_if_none",
    "map_of",
    "non_null_map_of",
    # Entry adapters (namespace)
    "entries",
)
