"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass
from typing import Any

from .constants import CATEGORIES, FICTION, FIELD_MAX_LENGTHS, FIELD_NAMES, NON_FICTION
from .exceptions import InvalidCategoryError, ValidationError

_CANONICAL_CATEGORIES = {category.lower(): category for category in CATEGORIES}


def validate_text(value: Any, field: str) -> str:
    """Validate a bounded text field according to domain business rules.

    Pure domain validation without logging or external dependencies.
    Whitespace-only text counts as empty, which is stricter than a plain
    length check.

    Args:
        value: The raw value to validate
        field: Name of the field being validated (for error messages)

    Returns:
        The accepted value, unchanged

    Raises:
        ValidationError: If value is missing, blank, or too long
    """
    label = field.upper() if field in ("id", "isbn") else field.title()

    if value is None or not isinstance(value, str):
        raise ValidationError(f"{label} is required", field=field)

    if not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=field)

    max_length = FIELD_MAX_LENGTHS[field]
    if len(value) > max_length:
        raise ValidationError(
            f"{label} cannot be longer than {max_length} characters", field=field
        )

    return value


def validate_book_id(value: Any) -> str:
    """Validate a book id: required, bounded, ASCII letters and digits only."""
    book_id = validate_text(value, "id")
    if not (book_id.isascii() and book_id.isalnum()):
        raise ValidationError(
            "ID must contain only alphanumeric characters", field="id"
        )
    return book_id


def normalize_category(value: Any) -> str:
    """Map a category to its canonical spelling, ignoring case.

    ``"fiction"``, ``"FICTION"`` and ``"Fiction"`` all become ``"Fiction"``;
    ``"non-fiction"`` in any case becomes ``"Non-fiction"``. Whitespace is
    not stripped.

    Raises:
        InvalidCategoryError: If value is not one of the two categories
    """
    if value is None or not isinstance(value, str):
        raise InvalidCategoryError("Category is required")

    canonical = _CANONICAL_CATEGORIES.get(value.lower())
    if canonical is None:
        raise InvalidCategoryError(
            f"Category must be either '{FICTION}' or '{NON_FICTION}'"
        )
    return canonical


def validate_field(field: str, value: Any) -> str:
    """Validate any book field by name and return the value to store.

    Raises:
        ValidationError: If the field is unknown or the value is invalid
    """
    if field == "id":
        return validate_book_id(value)
    if field == "category":
        return normalize_category(value)
    if field in FIELD_MAX_LENGTHS:
        return validate_text(value, field)
    raise ValidationError(f"Unknown field '{field}'", field=field)


@dataclass
class Book:
    """Core business entity representing one catalog entry.

    A fresh ``Book()`` has every field empty. Fields are filled one at a
    time through the ``set_*`` methods, each of which validates its value
    and returns ``False`` (leaving the previous value in place) when the
    value is rejected.

    Any other assignment, including the constructor, is validated too: a
    non-empty value must pass the field rule or ``ValidationError`` is
    raised, and categories are stored in canonical form.
    """

    id: str = ""
    isbn: str = ""
    title: str = ""
    author: str = ""
    edition: str = ""
    publication: str = ""
    category: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name in FIELD_NAMES and value != "":
            value = validate_field(name, value)
        super().__setattr__(name, value)

    @classmethod
    def from_fields(cls, **fields: Any) -> "Book":
        """Build a complete book, validating every field.

        Raises:
            ValidationError: For the first missing or invalid field
        """
        unknown = set(fields) - set(FIELD_NAMES)
        if unknown:
            name = sorted(unknown)[0]
            raise ValidationError(f"Unknown field '{name}'", field=name)

        book = cls()
        for field in FIELD_NAMES:
            setattr(book, field, validate_field(field, fields.get(field)))
        return book

    def set_field(self, field: str, value: Any) -> bool:
        """Validate and store one field. Returns False if rejected."""
        try:
            accepted = validate_field(field, value)
        except ValidationError:
            return False
        setattr(self, field, accepted)
        return True

    def set_id(self, value: Any) -> bool:
        return self.set_field("id", value)

    def set_isbn(self, value: Any) -> bool:
        return self.set_field("isbn", value)

    def set_title(self, value: Any) -> bool:
        return self.set_field("title", value)

    def set_author(self, value: Any) -> bool:
        return self.set_field("author", value)

    def set_edition(self, value: Any) -> bool:
        return self.set_field("edition", value)

    def set_publication(self, value: Any) -> bool:
        return self.set_field("publication", value)

    def set_category(self, value: Any) -> bool:
        """Store the canonical category; case of the input is ignored."""
        return self.set_field("category", value)

    def is_complete(self) -> bool:
        """Check that every field holds a valid value."""
        for field in FIELD_NAMES:
            try:
                validate_field(field, getattr(self, field))
            except ValidationError:
                return False
        return True

    def details(self) -> list[tuple[str, str]]:
        """Labelled field values for a detail view."""
        return [
            ("ID", self.id),
            ("ISBN", self.isbn),
            ("Title", self.title),
            ("Author", self.author),
            ("Edition", self.edition),
            ("Publication", self.publication),
            ("Category", self.category),
        ]

    def as_row(self) -> tuple[str, ...]:
        """Field values in table column order."""
        return tuple(getattr(self, field) for field in FIELD_NAMES)
