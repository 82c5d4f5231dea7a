"""Domain business rules and constants."""

from typing import Final

# Field length limits (characters, inclusive)
MAX_ID_LENGTH: Final = 19
MAX_ISBN_LENGTH: Final = 19
MAX_TITLE_LENGTH: Final = 99
MAX_AUTHOR_LENGTH: Final = 49
MAX_EDITION_LENGTH: Final = 19
MAX_PUBLICATION_LENGTH: Final = 49

# Canonical categories
FICTION: Final = "Fiction"
NON_FICTION: Final = "Non-fiction"
CATEGORIES: Final = (FICTION, NON_FICTION)

# Catalog limits
DEFAULT_CATALOG_CAPACITY: Final = 100
NOT_FOUND: Final = -1

FIELD_MAX_LENGTHS: Final = {
    "id": MAX_ID_LENGTH,
    "isbn": MAX_ISBN_LENGTH,
    "title": MAX_TITLE_LENGTH,
    "author": MAX_AUTHOR_LENGTH,
    "edition": MAX_EDITION_LENGTH,
    "publication": MAX_PUBLICATION_LENGTH,
}

# Column order for tables and detail views
FIELD_NAMES: Final = (
    "id",
    "isbn",
    "title",
    "author",
    "edition",
    "publication",
    "category",
)
