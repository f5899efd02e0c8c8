"""
String-list system for ordered collections of text tokens.

A collection either borrows its elements (views into caller text) or owns
them (independent copies); the choice is made at construction and is fixed
for the collection's lifetime.
"""

from typing import Optional, Union

from grit.string_list.base import StringListBase
from grit.string_list.borrowed import BorrowedStringList
from grit.string_list.comparators import (
    Comparator,
    Ordering,
    casefold_compare,
    default_compare,
    reverse_compare,
)
from grit.string_list.errors import StringListError, StringListIndexError
from grit.string_list.owned import OwnedStringList
from grit.string_list.schemas import SplitOptions, StorageMode, StringListRead
from grit.string_list.views import TextView


def create_string_list(
    mode: Union[StorageMode, str] = StorageMode.DUP,
    comparator: Optional[Comparator] = None,
) -> StringListBase:
    """
    Build an empty string list in the given storage mode.

    Raises:
        StringListError: If ``mode`` is not a known storage mode
    """
    try:
        mode = StorageMode(mode)
    except ValueError as e:
        raise StringListError(f"Unknown storage mode: {mode!r}") from e
    if mode == StorageMode.BORROW:
        return BorrowedStringList(comparator)
    return OwnedStringList(comparator)


__all__ = [
    "StringListBase",
    "BorrowedStringList",
    "OwnedStringList",
    "TextView",
    "create_string_list",
    "Comparator",
    "Ordering",
    "default_compare",
    "reverse_compare",
    "casefold_compare",
    "StringListError",
    "StringListIndexError",
    "SplitOptions",
    "StorageMode",
    "StringListRead",
]
