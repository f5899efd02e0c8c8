"""
Comparison functions for string lists.

A comparator takes two texts and returns a negative number, zero or a positive
number when the first sorts before, equal to or after the second. The same
function decides both the sort order and element equality.
"""

from enum import IntEnum
from typing import Callable

Comparator = Callable[[str, str], int]


class Ordering(IntEnum):
    """Canonical comparator results."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def default_compare(a: str, b: str) -> int:
    """
    Lexicographic code-point order.

    Code-point order on ``str`` matches byte order on the UTF-8 encoding, so
    this is the byte-wise comparison used when no comparator is installed.
    """
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_compare(a: str, b: str) -> int:
    """Reverse lexicographic order."""
    return default_compare(b, a)


def casefold_compare(a: str, b: str) -> int:
    """Case-insensitive order; texts differing only by case compare equal."""
    return default_compare(a.casefold(), b.casefold())
