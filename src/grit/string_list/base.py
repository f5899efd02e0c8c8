"""
Mode-agnostic string-list operations.

This module provides the shared half of the string-list system: iteration,
in-place filtering, stable sorting, unsorted and sorted lookups, swap-removal
and clearing. Every operation reads element text through ``_text`` so the same
code serves the borrowing and the owning collections; only storing a new
element (``_store``) and splitting differ between the two.
"""

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from operator import index as as_index
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from grit.string_list.comparators import Comparator, default_compare
from grit.string_list.errors import StringListIndexError
from grit.string_list.schemas import StorageMode, StringListRead
from grit.string_list.views import as_text

logger = logging.getLogger(__name__)

VisitFunc = Callable[[str], int]
KeepFunc = Callable[[str], bool]


class StringListBase(ABC):
    """
    Ordered collection of strings with an optional comparator.

    Insertion order is kept until ``sort`` is called. The comparator, when
    installed, replaces the default lexicographic order for sorting and for
    every equality test.

    Callbacks passed to ``for_each`` and ``filter`` must not mutate the list
    they are called on.
    """

    mode: StorageMode

    def __init__(self, comparator: Optional[Comparator] = None):
        self._items: List[Any] = []
        self._compare: Optional[Comparator] = None
        self.comparator = comparator

    # ---------------- storage hooks ----------------

    @abstractmethod
    def _text(self, element: Any) -> str:
        """Return the text of a stored element."""

    @abstractmethod
    def _store(self, text: Any) -> Any:
        """Build the element this list stores for ``text``."""

    @abstractmethod
    def append(self, text: Any) -> str:
        """Add ``text`` at the end and return its stored text."""

    # ---------------- comparator ----------------

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._compare

    @comparator.setter
    def comparator(self, compare: Optional[Comparator]) -> None:
        if compare is not None and not callable(compare):
            raise TypeError("comparator must be callable or None")
        logger.debug(f"{type(self).__name__}: comparator set to {getattr(compare, '__name__', compare)}")
        self._compare = compare

    def _active_compare(self) -> Comparator:
        return self._compare or default_compare

    # ---------------- core operations ----------------

    def clear(self) -> None:
        """Remove all elements. Borrowed sources are not touched."""
        self._items.clear()

    def for_each(self, visit: VisitFunc) -> int:
        """
        Call ``visit`` on each element's text in order.

        Returns:
            The first non-zero value ``visit`` returns, or 0 if every element
            was visited
        """
        for element in self._items:
            ret = visit(self._text(element))
            if ret:
                return ret
        return 0

    def filter(self, keep: KeepFunc) -> None:
        """
        Keep only the elements for which ``keep`` returns true.

        Single left-to-right compaction; retained elements keep their relative
        order. If ``keep`` raises, elements not yet tested are retained.
        """
        items = self._items
        count = len(items)
        src = dest = 0
        try:
            while src < count:
                element = items[src]
                if keep(self._text(element)):
                    items[dest] = element
                    dest += 1
                src += 1
        finally:
            del items[dest:src]
        logger.debug(f"filter kept {dest} of {count} elements")

    def sort(self) -> None:
        """Stable sort by the installed comparator, or lexicographically."""
        if self._compare is None:
            self._items.sort(key=self._text)
            return
        key = cmp_to_key(self._compare)
        self._items.sort(key=lambda element: key(self._text(element)))

    def unsorted_index(self, target: str) -> Optional[int]:
        """Index of the first element equal to ``target``, scanning linearly."""
        compare = self._active_compare()
        for i, element in enumerate(self._items):
            if compare(self._text(element), target) == 0:
                return i
        return None

    def unsorted_lookup(self, target: str) -> Optional[str]:
        """
        Find the first element equal to ``target`` without assuming sortedness.

        Equality is decided by the installed comparator, or by plain string
        equality when none is installed.

        Returns:
            The matching element's text, or None if nothing matches
        """
        i = self.unsorted_index(target)
        if i is None:
            return None
        return self._text(self._items[i])

    def unsorted_has(self, target: str) -> bool:
        return self.unsorted_index(target) is not None

    def unsorted_delete(self, index: int) -> str:
        """
        Remove the element at ``index`` by moving the last element into its slot.

        Constant time; does not preserve order.

        Returns:
            The removed element's text

        Raises:
            StringListIndexError: If ``index`` is not within ``0 <= index < len``
        """
        index = as_index(index)
        count = len(self._items)
        if not 0 <= index < count:
            raise StringListIndexError(
                f"index {index} out of range for string list of length {count}"
            )
        removed = self._items[index]
        last = self._items.pop()
        if index < count - 1:
            self._items[index] = last
        return self._text(removed)

    def iterate(self) -> Tuple[str, ...]:
        """Texts of all elements in current order."""
        return tuple(self._text(element) for element in self._items)

    # ---------------- sorted operations ----------------

    def find_insert_index(self, text: str) -> Tuple[int, bool]:
        """
        Binary-search a sorted list for ``text``.

        Returns:
            ``(index, exact)`` where ``exact`` tells whether an equal element
            sits at ``index``; otherwise ``index`` is where ``text`` belongs
        """
        compare = self._active_compare()
        lo, hi = 0, len(self._items)
        while lo < hi:
            mid = (lo + hi) // 2
            cmp = compare(text, self._text(self._items[mid]))
            if cmp < 0:
                hi = mid
            elif cmp > 0:
                lo = mid + 1
            else:
                return mid, True
        return lo, False

    def lookup(self, text: str) -> Optional[str]:
        """Sorted counterpart of ``unsorted_lookup``."""
        i, exact = self.find_insert_index(text)
        if not exact:
            return None
        return self._text(self._items[i])

    def has(self, text: str) -> bool:
        return self.find_insert_index(text)[1]

    def insert(self, text: Any) -> str:
        """
        Insert ``text`` into a sorted list, keeping it sorted.

        Nothing is inserted when an equal element already exists.

        Returns:
            The text of the existing or newly stored element
        """
        i, exact = self.find_insert_index(as_text(text))
        if exact:
            return self._text(self._items[i])
        element = self._store(text)
        self._items.insert(i, element)
        return self._text(element)

    def remove_duplicates(self) -> int:
        """
        Collapse runs of adjacent equal elements to their first element.

        Call after ``sort`` to remove every duplicate.

        Returns:
            Number of elements removed
        """
        items = self._items
        count = len(items)
        if count < 2:
            return 0
        compare = self._active_compare()
        dest = 1
        for src in range(1, count):
            if compare(self._text(items[dest - 1]), self._text(items[src])) != 0:
                items[dest] = items[src]
                dest += 1
        del items[dest:]
        logger.debug(f"remove_duplicates dropped {count - dest} elements")
        return count - dest

    # ---------------- convenience ----------------

    def append_nodup(self, text: Any) -> bool:
        """Append ``text`` unless an equal element exists. Returns whether it appended."""
        if self.unsorted_has(as_text(text)):
            return False
        self.append(text)
        return True

    def extend(self, texts: Iterable[Any]) -> None:
        for text in texts:
            self.append(text)

    def remove_empty_items(self) -> None:
        self.filter(lambda text: text != "")

    def to_read(self) -> StringListRead:
        return StringListRead(
            mode=self.mode,
            count=len(self._items),
            items=list(self.iterate()),
            custom_order=self._compare is not None,
        )

    # ---------------- Python protocols ----------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.iterate())

    def __getitem__(self, index: Union[int, slice]) -> Union[str, List[str]]:
        if isinstance(index, slice):
            return [self._text(element) for element in self._items[index]]
        return self._text(self._items[index])

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        return self.unsorted_has(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.iterate())!r})"
