"""
String list that borrows its elements.

Elements are ``TextView`` objects pointing into the caller's strings, so
appending and splitting never copy text. A view keeps its whole source
alive for as long as the list holds it.
"""

import logging
from typing import Any, Optional, Tuple

from grit.core.settings import UNLIMITED_SPLIT
from grit.string_list.base import StringListBase
from grit.string_list.comparators import Comparator
from grit.string_list.schemas import StorageMode
from grit.string_list.splitter import make_split_options, split_spans
from grit.string_list.views import TextView

logger = logging.getLogger(__name__)


class BorrowedStringList(StringListBase):
    """String list holding views into caller-owned text."""

    mode = StorageMode.BORROW

    def __init__(self, comparator: Optional[Comparator] = None):
        super().__init__(comparator)

    def _text(self, element: TextView) -> str:
        return str(element)

    def _store(self, text: Any) -> TextView:
        if isinstance(text, TextView):
            return text
        if isinstance(text, str):
            return TextView(text)
        raise TypeError(f"string list elements must be str, not {type(text).__name__}")

    def append(self, text: Any) -> str:
        """Store a reference to ``text``; nothing is copied."""
        element = self._store(text)
        self._items.append(element)
        return str(element)

    def split_in_place(self, source: str, delimiter: str, max_split: int = UNLIMITED_SPLIT) -> int:
        """
        Append the pieces of ``source`` as views into it.

        ``source`` is left unchanged. See ``split_spans`` for how the split
        budget is spent.

        Returns:
            Number of pieces appended
        """
        options = make_split_options(delimiter, max_split)
        count = 0
        for start, stop in split_spans(source, options):
            self._items.append(TextView(source, start, stop))
            count += 1
        logger.debug(f"split_in_place produced {count} pieces")
        return count

    def views(self) -> Tuple[TextView, ...]:
        """The stored views, in current order."""
        return tuple(self._items)
