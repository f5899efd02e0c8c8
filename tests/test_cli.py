"""
Tests for the grit command line.
"""

from typer.testing import CliRunner

from grit import __version__
from grit.cli.main_cli import main_app

runner = CliRunner()


class TestSplitCommand:
    """Test `grit strings split`."""

    def test_split_on_spaces(self):
        result = runner.invoke(main_app, ["strings", "split", "a b c"])

        assert result.exit_code == 0
        assert result.stdout == "a\nb\nc\n"

    def test_delimiter_and_budget(self):
        result = runner.invoke(main_app, ["strings", "split", "a,b,c", "-d", ",", "-m", "1"])

        assert result.exit_code == 0
        assert result.stdout == "a\nb,c\n"

    def test_borrow_mode(self):
        result = runner.invoke(main_app, ["strings", "split", "x:y", "-d", ":", "--mode", "borrow"])

        assert result.exit_code == 0
        assert result.stdout == "x\ny\n"

    def test_unique(self):
        result = runner.invoke(main_app, ["strings", "split", "b a b", "--unique"])

        assert result.exit_code == 0
        assert result.stdout == "a\nb\n"

    def test_drop_empty(self):
        result = runner.invoke(main_app, ["strings", "split", "a  b", "--drop-empty"])

        assert result.exit_code == 0
        assert result.stdout == "a\nb\n"

    def test_reverse_sort(self):
        result = runner.invoke(main_app, ["strings", "split", "a c b", "--sort", "--reverse"])

        assert result.exit_code == 0
        assert result.stdout == "c\nb\na\n"

    def test_empty_delimiter_is_an_error(self):
        result = runner.invoke(main_app, ["strings", "split", "abc", "-d", ""])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_unknown_mode_is_an_error(self):
        result = runner.invoke(main_app, ["strings", "split", "abc", "--mode", "copy"])

        assert result.exit_code == 1

    def test_table(self):
        result = runner.invoke(main_app, ["strings", "split", "a b", "--mode", "dup", "--table"])

        assert result.exit_code == 0
        assert "2 pieces (dup)" in result.stdout
        assert "'a'" in result.stdout
        assert "'b'" in result.stdout


class TestSortCommand:
    """Test `grit strings sort`."""

    def test_ignore_case_is_stable(self):
        result = runner.invoke(main_app, ["strings", "sort", "b", "A", "a", "-i"])

        assert result.exit_code == 0
        assert result.stdout == "A\na\nb\n"

    def test_reverse_unique(self):
        result = runner.invoke(main_app, ["strings", "sort", "a", "c", "a", "b", "-r", "-u"])

        assert result.exit_code == 0
        assert result.stdout == "c\nb\na\n"


class TestHasCommand:
    """Test `grit strings has`."""

    def test_found(self):
        result = runner.invoke(main_app, ["strings", "has", "main next seen", "next"])

        assert result.exit_code == 0
        assert result.stdout == "next\n"

    def test_not_found(self):
        result = runner.invoke(main_app, ["strings", "has", "main next", "maint"])

        assert result.exit_code == 1

    def test_ignore_case(self):
        result = runner.invoke(main_app, ["strings", "has", "main next", "NEXT", "-i"])

        assert result.exit_code == 0
        assert result.stdout == "next\n"

    def test_empty_delimiter_is_an_error(self):
        result = runner.invoke(main_app, ["strings", "has", "a b", "a", "-d", ""])

        assert result.exit_code == 2
        assert "Error" in result.stdout


def test_version():
    result = runner.invoke(main_app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
