"""
Test configuration and fixtures for grit string-list tests.
"""
import pytest

from grit.string_list import BorrowedStringList, OwnedStringList


@pytest.fixture(params=[BorrowedStringList, OwnedStringList], ids=["borrow", "dup"])
def string_list(request):
    """Fixture providing an empty string list in each storage mode."""
    return request.param()


@pytest.fixture
def sample_list(string_list):
    """Fixture providing the three-element list used across the core tests."""
    string_list.extend(["keep1", "dropme", "keep_number_2_1"])
    return string_list
