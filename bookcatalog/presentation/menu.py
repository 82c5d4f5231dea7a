"""Interactive text menu over a Catalog.

The menu holds no book state of its own: every action reads from or
writes to the catalog through exactly one catalog operation. Output goes
to a ``rich`` Console and input is read through rich prompts, either from
the terminal or from an explicit text stream.
"""

from collections.abc import Callable
from typing import Any, Final, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from ..application.catalog import Catalog
from ..application.validation import field_error
from ..config import settings
from ..domain.constants import FICTION, NON_FICTION
from ..domain.entities import Book
from ..domain.exceptions import CapacityExceededError
from ..logging_config import get_logger

logger: Final = get_logger(__name__)

MENU_OPTIONS: Final = (
    "Add Book",
    "Edit Book",
    "Search Book",
    "Delete Book",
    "View Books by Category",
    "View All Books",
    "Exit",
)
EXIT_CHOICE: Final = len(MENU_OPTIONS)

FIELD_PROMPTS: Final = {
    "category": f"Enter Category ({FICTION}/{NON_FICTION})",
    "id": "Enter ID (alphanumeric only)",
    "isbn": "Enter ISBN",
    "title": "Enter Title",
    "author": "Enter Author",
    "edition": "Enter Edition",
    "publication": "Enter Publication",
}

# Fields entered after the id, in prompt order
DETAIL_FIELDS: Final = ("isbn", "title", "author", "edition", "publication")

CATEGORY_NOT_FOUND: Final = (
    f"Category not found! Please enter either '{FICTION}' or '{NON_FICTION}'."
)


class _StreamInput:
    """Line reader that behaves like input(): no newline, EOFError at the end."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


class BookMenu:
    """Numbered main menu with one screen per catalog action."""

    def __init__(
        self,
        catalog: Catalog,
        console: Console | None = None,
        stream: TextIO | None = None,
        clear_screen: bool = True,
        title: str | None = None,
    ):
        self.catalog = catalog
        self.console = console or Console()
        self.stream: Any = _StreamInput(stream) if stream is not None else None
        self.clear_screen = clear_screen
        self.title = title or settings.app_name
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_book,
            2: self.edit_book,
            3: self.search_book,
            4: self.delete_book,
            5: self.view_by_category,
            6: self.view_all,
        }

    def run(self) -> None:
        """Show the menu until the operator exits or input ends."""
        logger.info("Menu started", capacity=self.catalog.capacity)
        try:
            while True:
                self._clear()
                choice = self.choose()
                if choice == EXIT_CHOICE:
                    break
                self._actions[choice]()
                self._pause()
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            logger.debug("Menu input ended")

        self.console.print(f"Exiting the {escape(self.title)}. Goodbye!")
        logger.info("Menu stopped", count=self.catalog.count())

    def choose(self) -> int:
        """Print the main menu and read a valid choice."""
        self.console.print(f"\n===== {escape(self.title.upper())} =====")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.console.print(f"{number}. {label}")
        return IntPrompt.ask(
            f"Enter your choice (1-{EXIT_CHOICE})",
            choices=[str(number) for number in range(1, EXIT_CHOICE + 1)],
            show_choices=False,
            console=self.console,
            stream=self.stream,
        )

    def add_book(self) -> None:
        self._heading("ADD NEW BOOK")
        if self.catalog.is_full:
            self.console.print("Failed to add book. The library is full.")
            return

        book = Book()
        self._prompt_field(book, "category")
        self._prompt_new_id(book)
        for field in DETAIL_FIELDS:
            self._prompt_field(book, field)

        result = self.catalog.create(book)
        if result:
            self.console.print("Book added successfully!")
        elif isinstance(result.error, CapacityExceededError):
            self.console.print("Failed to add book. The library is full.")
        else:
            self.console.print(f"Failed to add book. {escape(str(result.error))}")

    def edit_book(self) -> None:
        self._heading("EDIT BOOK")
        book_id = self._ask("Enter the ID of the book to edit")
        found = self.catalog.read(book_id)
        if not found:
            self.console.print("Book not found!")
            return

        current = found.unwrap()
        self.console.print("\nCurrent Book Details:")
        self.show_details(current)
        self.console.print("\nEnter new details (leave blank to keep current value):")

        updated = Book(id=current.id)
        for field in ("category", *DETAIL_FIELDS):
            self._prompt_field(updated, field, default=getattr(current, field))

        if self.catalog.update(book_id, updated):
            self.console.print("Book edited successfully!")
        else:
            self.console.print("Failed to edit book.")

    def search_book(self) -> None:
        self._heading("SEARCH BOOK")
        book_id = self._ask("Enter the ID of the book to search")
        found = self.catalog.read(book_id)
        if found:
            self.show_details(found.unwrap())
        else:
            self.console.print("Book not found!")

    def delete_book(self) -> None:
        self._heading("DELETE BOOK")
        book_id = self._ask("Enter the ID of the book to delete")
        found = self.catalog.read(book_id)
        if not found:
            self.console.print("Book not found!")
            return

        self.console.print("\nBook Details:")
        self.show_details(found.unwrap())
        confirmed = Confirm.ask(
            "\nDo you want to delete this book?",
            console=self.console,
            stream=self.stream,
        )
        if not confirmed:
            self.console.print("Deletion cancelled.")
        elif self.catalog.delete(book_id):
            self.console.print("Book deleted successfully!")
        else:
            self.console.print("Failed to delete book.")

    def view_by_category(self) -> None:
        self._heading("VIEW BOOKS BY CATEGORY")
        while True:
            category = self._ask(FIELD_PROMPTS["category"])
            result = self.catalog.list_by_category(category)
            if result:
                break
            self.console.print(CATEGORY_NOT_FOUND)

        books = result.unwrap()
        if not books:
            self.console.print("No books found in this category.")
            return
        self.console.print(f"\nBooks in category '{escape(books[0].category)}':")
        self.show_table(books)

    def view_all(self) -> None:
        self._heading("VIEW ALL BOOKS")
        books = self.catalog.list_all()
        if not books:
            self.console.print("No books available in the library.")
            return
        self.console.print(f"Total Books: {len(books)}\n")
        self.show_table(books)

    def show_details(self, book: Book) -> None:
        for label, value in book.details():
            self.console.print(f"{label}: {escape(value)}")

    def show_table(self, books: list[Book]) -> None:
        table = Table(show_lines=True)
        for label, _ in Book().details():
            table.add_column(label)
        for book in books:
            table.add_row(*(escape(value) for value in book.as_row()))
        self.console.print(table)

    def _prompt_field(self, book: Book, field: str, default: str | None = None) -> None:
        """Ask for one field until the book's setter accepts the value."""
        while True:
            value = self._ask(FIELD_PROMPTS[field], default=default)
            if book.set_field(field, value):
                return
            if field == "category":
                self.console.print(CATEGORY_NOT_FOUND)
            else:
                error = field_error(field, value) or "Invalid value."
                self.console.print(escape(error))

    def _prompt_new_id(self, book: Book) -> None:
        """Ask for an id until it is valid and not already in the catalog."""
        while True:
            book_id = self._ask(FIELD_PROMPTS["id"])
            error = field_error("id", book_id)
            if error:
                self.console.print(escape(error))
            elif self.catalog.is_duplicate_id(book_id):
                self.console.print("Duplicate ID! Please enter a unique ID.")
            elif book.set_id(book_id):
                return

    def _ask(self, prompt: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(prompt, console=self.console, stream=self.stream)
        return Prompt.ask(
            prompt,
            default=default,
            console=self.console,
            stream=self.stream,
        )

    def _heading(self, text: str) -> None:
        self._clear()
        self.console.print(f"\n===== {text} =====")

    def _clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def _pause(self) -> None:
        if self.stream is None and self.console.is_terminal:
            self.console.input("Press Enter to continue...")
