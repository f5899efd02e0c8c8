"""
CLI commands for building and reshaping string lists.

These commands split text into a string list, then sort, deduplicate or search
it, printing one element per line.
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from grit.core.config import settings
from grit.string_list import (
    StorageMode,
    StringListBase,
    StringListError,
    casefold_compare,
    create_string_list,
    reverse_compare,
)

logger = logging.getLogger(__name__)

strings_app = typer.Typer(help="Commands to split, sort and search string lists.")
console = Console()


def _pick_comparator(reverse: bool, ignore_case: bool):
    if ignore_case and reverse:
        return lambda a, b: casefold_compare(b, a)
    if ignore_case:
        return casefold_compare
    if reverse:
        return reverse_compare
    return None


def _print_list(string_list: StringListBase, table: bool) -> None:
    if not table:
        for text in string_list:
            typer.echo(text)
        return

    summary = string_list.to_read()
    out = Table(title=f"{summary.count} pieces ({summary.mode.value})")
    out.add_column("Index", justify="right")
    out.add_column("Piece")
    for i, text in enumerate(summary.items):
        out.add_row(str(i), repr(text))
    console.print(out)


def _split_into_list(text: str, delimiter: Optional[str], max_split: Optional[int], mode: str, comparator) -> StringListBase:
    string_list = create_string_list(mode, comparator=comparator)
    delimiter = delimiter if delimiter is not None else settings.default_delimiter
    max_split = max_split if max_split is not None else settings.default_max_split
    if string_list.mode == StorageMode.BORROW:
        count = string_list.split_in_place(text, delimiter, max_split)
    else:
        count = string_list.split(text, delimiter, max_split)
    logger.info(f"Split input into {count} pieces")
    return string_list


@strings_app.command("split")
def split_cmd(
    text: str = typer.Argument(..., help="Text to split"),
    delimiter: Optional[str] = typer.Option(
        None, "--delimiter", "-d",
        help="Delimiter to split on (default from GRIT_DEFAULT_DELIMITER)"
    ),
    max_split: Optional[int] = typer.Option(
        None, "--max-split", "-m",
        help="Maximum number of splits; negative means unlimited"
    ),
    mode: str = typer.Option(
        settings.default_mode, "--mode",
        help="Storage mode (borrow, dup)"
    ),
    sort: bool = typer.Option(False, "--sort", help="Sort the pieces"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Use reverse order"),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Compare case-insensitively"),
    unique: bool = typer.Option(False, "--unique", "-u", help="Sort and drop duplicate pieces"),
    keep_empty: bool = typer.Option(True, "--keep-empty/--drop-empty", help="Keep empty pieces"),
    table: bool = typer.Option(False, "--table", help="Print a table of index and piece"),
):
    """
    Split TEXT into pieces and print one per line.
    """
    try:
        string_list = _split_into_list(
            text, delimiter, max_split, mode, _pick_comparator(reverse, ignore_case)
        )
    except StringListError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=1)

    if not keep_empty:
        string_list.remove_empty_items()
    if sort or unique:
        string_list.sort()
    if unique:
        string_list.remove_duplicates()

    _print_list(string_list, table)


@strings_app.command("has")
def has_cmd(
    text: str = typer.Argument(..., help="Text to split"),
    needle: str = typer.Argument(..., help="Piece to look for"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Delimiter to split on"),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Compare case-insensitively"),
):
    """
    Exit with status 0 when NEEDLE is one of the pieces of TEXT, 1 otherwise.
    """
    try:
        string_list = _split_into_list(
            text, delimiter, None, settings.default_mode,
            casefold_compare if ignore_case else None
        )
    except StringListError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=2)

    found = string_list.unsorted_lookup(needle)
    if found is None:
        raise typer.Exit(code=1)
    typer.echo(found)


@strings_app.command("sort")
def sort_cmd(
    words: List[str] = typer.Argument(..., help="Words to sort"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Use reverse order"),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Compare case-insensitively"),
    unique: bool = typer.Option(False, "--unique", "-u", help="Drop duplicate words"),
):
    """
    Sort WORDS and print one per line. Equal words keep their input order.
    """
    string_list = create_string_list(
        StorageMode.BORROW, comparator=_pick_comparator(reverse, ignore_case)
    )
    string_list.extend(words)
    string_list.sort()
    if unique:
        removed = string_list.remove_duplicates()
        logger.debug(f"Dropped {removed} duplicate words")
    _print_list(string_list, table=False)
