"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when a field value breaks a domain rule."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidCategoryError(ValidationError):
    """Raised when a category is neither Fiction nor Non-fiction."""

    def __init__(self, message: str):
        super().__init__(message, field="category")


class NotFoundError(DomainError):
    """Raised when no book has the requested id."""

    pass


class CapacityExceededError(DomainError):
    """Raised when adding a book to a full catalog."""

    pass


class DuplicateIdError(DomainError):
    """Raised when attempting to add a book whose id is already taken."""

    pass
