"""
Schemas for the string-list system.

This module defines the storage modes a collection can be built in and the
validated parameter models for operations that take several arguments.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from grit.core.settings import UNLIMITED_SPLIT


class StorageMode(str, Enum):
    """How a collection holds its elements."""
    BORROW = "borrow"   # Views into caller-owned text, no copying
    DUP = "dup"         # Independent copies of text


class SplitOptions(BaseModel):
    """Parameters for splitting a source string into a collection."""
    delimiter: str = Field(min_length=1)
    max_split: int = UNLIMITED_SPLIT  # Negative means unlimited

    @property
    def unlimited(self) -> bool:
        return self.max_split < 0


class StringListRead(BaseModel):
    """Snapshot of a collection for display."""
    mode: StorageMode
    count: int
    items: List[str] = Field(default_factory=list)
    custom_order: bool = False
