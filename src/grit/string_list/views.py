"""
Read-only views into caller-owned text.

A ``TextView`` names a sub-range of a ``str`` without slicing it. Python
strings are immutable, so a view can never observe a changed source; holding
the view keeps the source alive.
"""

from typing import Any, Optional


class TextView:
    """Read-only view of ``source[start:stop]``."""

    __slots__ = ("source", "start", "stop")

    def __init__(self, source: str, start: int = 0, stop: Optional[int] = None):
        if not isinstance(source, str):
            raise TypeError(f"TextView source must be str, not {type(source).__name__}")
        if stop is None:
            stop = len(source)
        if not 0 <= start <= stop <= len(source):
            raise ValueError(
                f"span {start}:{stop} outside source of length {len(source)}"
            )
        self.source = source
        self.start = start
        self.stop = stop

    def covers_source(self) -> bool:
        """True when the view spans the whole source."""
        return self.start == 0 and self.stop == len(self.source)

    def __str__(self) -> str:
        if self.covers_source():
            return self.source
        return self.source[self.start:self.stop]

    def __len__(self) -> int:
        return self.stop - self.start

    def __eq__(self, other) -> bool:
        if isinstance(other, (TextView, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"TextView({str(self)!r}, {self.start}, {self.stop})"


def as_text(value: Any) -> str:
    """
    Return the text of a ``str`` or ``TextView``.

    Raises:
        TypeError: For any other type
    """
    if isinstance(value, str):
        return value
    if isinstance(value, TextView):
        return str(value)
    raise TypeError(f"string list elements must be str, not {type(value).__name__}")
