"""
Exceptions raised by string-list operations.
"""


class StringListError(Exception):
    """Base exception for string-list operations"""
    pass


class StringListIndexError(StringListError, IndexError):
    """Raised when an element index is outside the collection"""
    pass
