"""
Delimiter splitting for string lists.

The scan is written once as a generator of ``(start, stop)`` spans over the
source so that the borrowing list can keep views and the owning list can take
copies of the same pieces.
"""

import logging
from typing import Iterator, Tuple

from pydantic import ValidationError

from grit.string_list.errors import StringListError
from grit.string_list.schemas import SplitOptions

logger = logging.getLogger(__name__)

Span = Tuple[int, int]


def make_split_options(delimiter: str, max_split: int) -> SplitOptions:
    """
    Validate split arguments.

    Raises:
        StringListError: If the delimiter is empty or an argument has the wrong type
    """
    try:
        return SplitOptions(delimiter=delimiter, max_split=max_split)
    except ValidationError as e:
        raise StringListError(f"Invalid split arguments: {e}") from e


def split_spans(source: str, options: SplitOptions) -> Iterator[Span]:
    """
    Yield the spans of ``source`` separated by ``options.delimiter``.

    The piece counter starts at 1. Once it exceeds ``max_split`` (when
    ``max_split`` is non-negative) everything not yet scanned, delimiters
    included, becomes the final piece. An empty source yields one empty span.

    Args:
        source: Text to split
        options: Validated delimiter and split budget

    Yields:
        ``(start, stop)`` index pairs into ``source``, left to right
    """
    if not isinstance(source, str):
        raise TypeError(f"split source must be str, not {type(source).__name__}")

    delimiter = options.delimiter
    step = len(delimiter)
    pos = 0
    count = 0

    while True:
        count += 1
        if not options.unlimited and count > options.max_split:
            yield pos, len(source)
            return

        end = source.find(delimiter, pos)
        if end < 0:
            yield pos, len(source)
            return

        yield pos, end
        pos = end + step
