"""
Pure helper functions for collections, rounding, locale lookup and objects.
"""

from .collection import (
    dedupe,
    dedupe_by,
    find_first,
    find_first_indexed,
    group_by,
    group_by_map,
    is_value,
    range_list,
    unique,
    unique_by,
    zip_pairs,
)
from .i18n import get_localized_value, parse_locale
from .numeric import (
    by_max,
    by_min,
    clamp,
    round_half_down,
    round_half_even,
    round_half_up,
    round_value,
    sum_by,
)
from .objects import create_object_hash, object_map, pick, prune_object
from .strings import equals_ignoring_case

__all__ = [
    "is_value",
    "unique",
    "unique_by",
    "dedupe",
    "dedupe_by",
    "group_by_map",
    "group_by",
    "find_first",
    "find_first_indexed",
    "range_list",
    "zip_pairs",
    "parse_locale",
    "get_localized_value",
    "round_half_even",
    "round_half_up",
    "round_half_down",
    "round_value",
    "sum_by",
    "by_min",
    "by_max",
    "clamp",
    "equals_ignoring_case",
    "prune_object",
    "pick",
    "object_map",
    "create_object_hash",
]
