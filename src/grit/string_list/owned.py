"""
String list that owns its elements.

Every element is an independent ``str``. Pieces taken from a larger source are
sliced out, so the list never keeps that source alive.
"""

import logging
from typing import Any, Optional

from grit.core.settings import UNLIMITED_SPLIT
from grit.string_list.base import StringListBase
from grit.string_list.comparators import Comparator
from grit.string_list.schemas import StorageMode
from grit.string_list.splitter import make_split_options, split_spans
from grit.string_list.views import as_text

logger = logging.getLogger(__name__)


class OwnedStringList(StringListBase):
    """String list holding its own copies of text."""

    mode = StorageMode.DUP

    def __init__(self, comparator: Optional[Comparator] = None):
        super().__init__(comparator)

    def _text(self, element: str) -> str:
        return element

    def _store(self, text: Any) -> str:
        # str() drops str subclasses down to a plain, independent str
        return str(as_text(text))

    def append(self, text: Any) -> str:
        """Store a copy of ``text``; the source may be discarded afterwards."""
        element = self._store(text)
        self._items.append(element)
        return element

    def split(self, source: str, delimiter: str, max_split: int = UNLIMITED_SPLIT) -> int:
        """
        Append copies of the pieces of ``source``.

        Same partitioning as ``BorrowedStringList.split_in_place``.

        Returns:
            Number of pieces appended
        """
        options = make_split_options(delimiter, max_split)
        count = 0
        for start, stop in split_spans(source, options):
            self._items.append(source[start:stop])
            count += 1
        logger.debug(f"split produced {count} pieces")
        return count
