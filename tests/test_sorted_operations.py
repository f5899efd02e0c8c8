"""
Unit tests for binary-search operations on sorted string lists.
"""

from grit.string_list import casefold_compare


class TestFindInsertIndex:
    """Test locating elements in a sorted list."""

    def test_exact_match(self, string_list):
        string_list.extend(["c", "a", "b"])
        string_list.sort()

        assert string_list.find_insert_index("b") == (1, True)

    def test_insert_position(self, string_list):
        string_list.extend(["a", "b", "c"])

        assert string_list.find_insert_index("bb") == (2, False)
        assert string_list.find_insert_index("0") == (0, False)
        assert string_list.find_insert_index("z") == (3, False)

    def test_empty_list(self, string_list):
        assert string_list.find_insert_index("a") == (0, False)


class TestLookupAndHas:
    """Test sorted lookups against their unsorted counterparts."""

    def test_agrees_with_unsorted_lookup(self, string_list):
        string_list.extend(["delta", "alpha", "charlie", "bravo"])
        string_list.sort()

        for word in ["alpha", "bravo", "charlie", "delta", "echo"]:
            assert string_list.lookup(word) == string_list.unsorted_lookup(word)
            assert string_list.has(word) == string_list.unsorted_has(word)

    def test_uses_comparator(self, string_list):
        string_list.comparator = casefold_compare
        string_list.extend(["Beta", "alpha"])
        string_list.sort()

        assert string_list.lookup("BETA") == "Beta"


class TestInsert:
    """Test sorted insertion."""

    def test_keeps_list_sorted(self, string_list):
        for word in ["m", "c", "x", "a"]:
            string_list.insert(word)

        assert list(string_list) == ["a", "c", "m", "x"]

    def test_existing_element_not_inserted(self, string_list):
        string_list.insert("a")
        result = string_list.insert("a")

        assert result == "a"
        assert len(string_list) == 1

    def test_existing_by_comparator(self, string_list):
        string_list.comparator = casefold_compare
        string_list.insert("Main")

        assert string_list.insert("MAIN") == "Main"
        assert list(string_list) == ["Main"]


class TestRemoveDuplicates:
    """Test collapsing runs of equal elements."""

    def test_after_sort(self, string_list):
        string_list.extend(["b", "a", "b", "a", "c"])
        string_list.sort()

        assert string_list.remove_duplicates() == 2
        assert list(string_list) == ["a", "b", "c"]

    def test_only_adjacent_runs(self, string_list):
        string_list.extend(["a", "b", "a"])

        assert string_list.remove_duplicates() == 0
        assert list(string_list) == ["a", "b", "a"]

    def test_keeps_first_of_run(self, string_list):
        string_list.comparator = casefold_compare
        string_list.extend(["a", "A", "B", "b"])
        string_list.sort()
        string_list.remove_duplicates()

        assert list(string_list) == ["a", "B"]

    def test_short_lists(self, string_list):
        assert string_list.remove_duplicates() == 0
        string_list.append("one")
        assert string_list.remove_duplicates() == 0
        assert list(string_list) == ["one"]
