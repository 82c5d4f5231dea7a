"""Tests for the interactive menu, driven by scripted input."""

import io

import pytest
from rich.console import Console

from bookcatalog.application.catalog import Catalog
from bookcatalog.presentation.menu import CATEGORY_NOT_FOUND, BookMenu


def run_menu(catalog: Catalog, console: Console, *lines: str) -> str:
    """Run the menu over the given input lines and return everything printed."""
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    BookMenu(catalog, console=console, stream=stream, clear_screen=False).run()
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture(name="stocked")
def stocked_fixture(make_book) -> Catalog:
    catalog = Catalog()
    catalog.create(make_book("A1", title="The Odyssey", category="Fiction"))
    catalog.create(
        make_book("B2", title="Cosmos", author="Carl Sagan", category="Non-fiction")
    )
    return catalog


def test_menu_lists_options_and_exits(catalog: Catalog, console: Console):
    output = run_menu(catalog, console, "7")

    assert "1. Add Book" in output
    assert "7. Exit" in output
    assert "Goodbye!" in output


def test_menu_reprompts_on_invalid_choice(catalog: Catalog, console: Console):
    output = run_menu(catalog, console, "9", "abc", "7")
    assert output.count("Enter your choice (1-7)") == 3
    assert "Goodbye!" in output


def test_menu_stops_at_end_of_input(catalog: Catalog, console: Console):
    """Test that running out of input mid-form exits without adding a book."""
    output = run_menu(catalog, console, "1", "Fiction", "A1")

    assert "Goodbye!" in output
    assert catalog.count() == 0


def test_add_book(catalog: Catalog, console: Console):
    """Test adding a book through the menu.

    Covers:
    - Category input is case-insensitive and stored canonically
    - The book is created with every entered field
    """
    output = run_menu(
        catalog,
        console,
        "1",
        "fiction",
        "D1",
        "978-0441013593",
        "Dune",
        "Frank Herbert",
        "1st",
        "Chilton Books",
        "7",
    )

    assert "Book added successfully!" in output
    book = catalog.read("D1").unwrap()
    assert book.category == "Fiction"
    assert book.title == "Dune"
    assert book.publication == "Chilton Books"


def test_add_book_reprompts_until_each_field_is_valid(
    stocked: Catalog, console: Console
):
    """Test that invalid, duplicate and blank values are re-prompted."""
    output = run_menu(
        stocked,
        console,
        "1",
        "poetry",
        "Non-fiction",
        "",
        "C-3",
        "A1",
        "C3",
        "",
        "123",
        "A Brief History of Time",
        "Stephen Hawking",
        "1st",
        "Bantam",
        "7",
    )

    assert CATEGORY_NOT_FOUND in output
    assert "ID cannot be empty" in output
    assert "ID must contain only alphanumeric characters" in output
    assert "Duplicate ID! Please enter a unique ID." in output
    assert "ISBN cannot be empty" in output
    assert "Book added successfully!" in output
    assert stocked.read("C3").unwrap().category == "Non-fiction"
    assert stocked.count() == 3


def test_add_book_when_full(make_book, console: Console):
    catalog = Catalog(1)
    catalog.create(make_book("A1"))

    output = run_menu(catalog, console, "1", "7")

    assert "Failed to add book. The library is full." in output
    assert catalog.count() == 1


def test_edit_book_keeps_blank_fields(stocked: Catalog, console: Console):
    """Test editing where blank input keeps the current value."""
    before = stocked.read("A1").unwrap()

    output = run_menu(
        stocked, console, "2", "A1", "", "", "The Iliad", "", "", "", "7"
    )

    assert "Current Book Details:" in output
    assert "Book edited successfully!" in output
    after = stocked.read("A1").unwrap()
    assert after.title == "The Iliad"
    assert after.id == "A1"
    assert after.category == before.category
    assert after.author == before.author
    assert stocked.find_index("A1") == 0


def test_edit_book_can_change_category(stocked: Catalog, console: Console):
    run_menu(stocked, console, "2", "A1", "NON-FICTION", "", "", "", "", "", "7")
    assert stocked.read("A1").unwrap().category == "Non-fiction"


def test_edit_missing_book(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "2", "ZZ", "7")
    assert "Book not found!" in output


def test_search_book(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "3", "B2", "3", "nope", "7")

    assert "Title: Cosmos" in output
    assert "Author: Carl Sagan" in output
    assert "Category: Non-fiction" in output
    assert "Book not found!" in output


def test_search_shows_brackets_literally(make_book, console: Console):
    catalog = Catalog()
    catalog.create(make_book("N1", title="Notes [draft]"))

    output = run_menu(catalog, console, "3", "N1", "7")

    assert "Title: Notes [draft]" in output


def test_delete_book_after_confirmation(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "4", "A1", "maybe", "y", "7")

    assert "Book Details:" in output
    assert "Book deleted successfully!" in output
    assert [book.id for book in stocked.list_all()] == ["B2"]


def test_delete_book_cancelled(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "4", "A1", "n", "7")

    assert "Deletion cancelled." in output
    assert stocked.count() == 2


def test_delete_missing_book(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "4", "ZZ", "7")
    assert "Book not found!" in output
    assert stocked.count() == 2


def test_view_by_category(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "5", "poetry", "FICTION", "7")

    assert CATEGORY_NOT_FOUND in output
    assert "Books in category 'Fiction':" in output
    assert "The Odyssey" in output
    assert "Cosmos" not in output


def test_view_by_category_without_matches(make_book, console: Console):
    catalog = Catalog()
    catalog.create(make_book("A1", category="Fiction"))

    output = run_menu(catalog, console, "5", "Non-fiction", "7")

    assert "No books found in this category." in output


def test_view_all(stocked: Catalog, console: Console):
    output = run_menu(stocked, console, "6", "7")

    assert "Total Books: 2" in output
    assert "Publication" in output
    assert output.index("The Odyssey") < output.index("Cosmos")


def test_view_all_empty(catalog: Catalog, console: Console):
    output = run_menu(catalog, console, "6", "7")
    assert "No books available in the library." in output
