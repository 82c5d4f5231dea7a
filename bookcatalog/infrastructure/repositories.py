"""Infrastructure layer - Repository implementations."""

from collections.abc import Iterator
from copy import copy

from ..domain.constants import DEFAULT_CATALOG_CAPACITY, NOT_FOUND
from ..domain.entities import Book
from ..domain.exceptions import (
    CapacityExceededError,
    DuplicateIdError,
    NotFoundError,
    ValidationError,
)


class InMemoryBookRepository:
    """Ordered, bounded in-memory storage for books keyed by id.

    Books are kept in a dict, which preserves insertion order: replacing a
    value keeps its position and deleting a key closes the gap. Stored
    books are copies, and copies are returned, so callers never hold a
    reference into the repository.
    """

    def __init__(self, capacity: int | None = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            capacity = DEFAULT_CATALOG_CAPACITY
        self.capacity = capacity if capacity > 0 else DEFAULT_CATALOG_CAPACITY
        self._books: dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return isinstance(book_id, str) and book_id in self._books

    def is_full(self) -> bool:
        return len(self._books) >= self.capacity

    def add(self, book: Book) -> Book:
        """Append a book at the end of the catalog order."""
        if self.is_full():
            raise CapacityExceededError(
                f"Catalog is full ({self.capacity} books)"
            )
        if not book.id:
            raise ValidationError("ID cannot be empty", field="id")
        if book.id in self._books:
            raise DuplicateIdError(f"Book '{book.id}' already exists")

        self._books[book.id] = copy(book)
        return copy(book)

    def index_of(self, book_id: str | None) -> int:
        """Position of the book in catalog order, or NOT_FOUND."""
        if not book_id:
            return NOT_FOUND
        for index, stored_id in enumerate(self._books):
            if stored_id == book_id:
                return index
        return NOT_FOUND

    def get(self, book_id: str | None) -> Book:
        if book_id not in self:
            raise NotFoundError(f"Book '{book_id}' not found")
        return copy(self._books[book_id])  # type: ignore[index]

    def replace(self, book_id: str | None, book: Book) -> Book:
        """Replace the stored book in place; the stored id always wins."""
        if book_id not in self:
            raise NotFoundError(f"Book '{book_id}' not found")
        stored = copy(book)
        stored.id = book_id  # type: ignore[assignment]
        self._books[book_id] = stored  # type: ignore[index]
        return copy(stored)

    def remove(self, book_id: str | None) -> Book:
        if book_id not in self:
            raise NotFoundError(f"Book '{book_id}' not found")
        return self._books.pop(book_id)  # type: ignore[arg-type]

    def iter_all(self) -> Iterator[Book]:
        for book in list(self._books.values()):
            yield copy(book)
