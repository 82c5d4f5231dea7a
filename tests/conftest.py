import io
import logging
from collections.abc import Callable

import pytest
from rich.console import Console

from bookcatalog.application.catalog import Catalog
from bookcatalog.domain.entities import Book
from bookcatalog.logging_config import configure_structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any logging setup done by a test (e.g. through the CLI)."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    configure_structlog()


@pytest.fixture(name="make_book")
def make_book_fixture() -> Callable[..., Book]:
    """Factory for valid books; keyword arguments override fields."""

    def _make_book(book_id: str = "A1", **fields: str) -> Book:
        values = {
            "id": book_id,
            "isbn": "978-0140449136",
            "title": "The Odyssey",
            "author": "Homer",
            "edition": "1st",
            "publication": "Penguin Classics",
            "category": "Fiction",
        }
        values.update(fields)
        return Book.from_fields(**values)

    return _make_book


@pytest.fixture(name="catalog")
def catalog_fixture() -> Catalog:
    return Catalog()


@pytest.fixture(name="console")
def console_fixture() -> Console:
    """Console that records output in memory, wide enough for tables."""
    return Console(file=io.StringIO(), width=200, color_system=None)
