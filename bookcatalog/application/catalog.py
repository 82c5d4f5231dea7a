"""Catalog use cases: create, read, update, delete and list books.

Every operation reports failure through an ``OperationResult`` instead of
raising, so a caller such as the menu never has to guard against domain
exceptions escaping the catalog.
"""

from collections.abc import Iterator
from typing import Final

from ..domain.constants import NOT_FOUND
from ..domain.entities import Book, normalize_category
from ..domain.exceptions import DomainError, ValidationError
from ..infrastructure.repositories import InMemoryBookRepository
from ..logging_config import get_logger
from ..logging_utils import log_catalog_operation
from .results import OperationResult

logger: Final = get_logger(__name__)


class Catalog:
    """Bounded, insertion-ordered collection of books with unique ids.

    Single-threaded by design: there is no internal locking, so callers
    sharing a catalog between threads must serialise access themselves.
    """

    def __init__(self, capacity: int | None = None):
        self._repo = InMemoryBookRepository(capacity)
        logger.debug("Catalog created", capacity=self._repo.capacity)

    @property
    def capacity(self) -> int:
        return self._repo.capacity

    @property
    def is_full(self) -> bool:
        return self._repo.is_full()

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Book]:
        return self._repo.iter_all()

    def count(self) -> int:
        return len(self._repo)

    def is_duplicate_id(self, book_id: str | None) -> bool:
        """Check whether a book with this exact id is already stored."""
        return self._repo.index_of(book_id) != NOT_FOUND

    def find_index(self, book_id: str | None) -> int:
        """Position of the book in catalog order, or NOT_FOUND (-1)."""
        return self._repo.index_of(book_id)

    def create(self, book: Book) -> OperationResult[Book]:
        """Add a book at the end of the catalog.

        Fails when the catalog is full, the id is empty, or the id is
        already taken. The catalog stores its own copy of ``book``.
        """
        if not isinstance(book, Book):
            return self._failed("create", _missing_book(), book_id=None)

        logger.debug("Creating book", book_id=book.id)
        try:
            created = self._repo.add(book)
        except DomainError as e:
            return self._failed("create", e, book_id=book.id)

        log_catalog_operation("create", book_id=created.id, count=self.count())
        logger.info("Book created successfully", book_id=created.id)
        return OperationResult.success(created)

    def read(self, book_id: str | None) -> OperationResult[Book]:
        """Return a copy of the book with this id."""
        try:
            return OperationResult.success(self._repo.get(book_id))
        except DomainError as e:
            logger.debug("Book lookup failed - not found", book_id=book_id)
            return OperationResult.failure(e)

    def update(self, book_id: str | None, replacement: Book) -> OperationResult[Book]:
        """Replace every field of a stored book except its id.

        The id argument is authoritative: whatever id ``replacement``
        carries, the stored book keeps ``book_id``.
        """
        if not isinstance(replacement, Book):
            return self._failed("update", _missing_book(), book_id=book_id)

        logger.debug("Updating book", book_id=book_id)
        try:
            updated = self._repo.replace(book_id, replacement)
        except DomainError as e:
            return self._failed("update", e, book_id=book_id)

        log_catalog_operation("update", book_id=updated.id)
        logger.info("Book updated successfully", book_id=updated.id)
        return OperationResult.success(updated)

    def delete(self, book_id: str | None) -> OperationResult[Book]:
        """Remove a book; later books move up one position."""
        logger.debug("Deleting book", book_id=book_id)
        try:
            removed = self._repo.remove(book_id)
        except DomainError as e:
            return self._failed("delete", e, book_id=book_id)

        log_catalog_operation("delete", book_id=removed.id, count=self.count())
        logger.info("Book deleted successfully", book_id=removed.id)
        return OperationResult.success(removed)

    def list_all(self) -> list[Book]:
        """All books in catalog order; empty list for an empty catalog."""
        return list(self._repo.iter_all())

    def list_by_category(self, category: str | None) -> OperationResult[list[Book]]:
        """Books in one category, in catalog order.

        The category is normalized the same way as ``Book.set_category``.
        An unrecognised category yields a failed result carrying
        ``InvalidCategoryError``; a valid category with no books yields a
        successful empty list.
        """
        try:
            canonical = normalize_category(category)
        except ValidationError as e:
            logger.debug("Category filter rejected", category=category)
            return OperationResult.failure(e)

        return OperationResult.success(
            [book for book in self._repo.iter_all() if book.category == canonical]
        )

    def _failed(
        self, operation: str, error: DomainError, book_id: str | None
    ) -> OperationResult[Book]:
        log_catalog_operation(
            operation,
            success=False,
            book_id=book_id,
            reason=type(error).__name__,
        )
        logger.warning(
            f"Book {operation} failed - {error}",
            book_id=book_id,
            reason=type(error).__name__,
        )
        return OperationResult.failure(error)


def _missing_book() -> ValidationError:
    return ValidationError("A book is required")
