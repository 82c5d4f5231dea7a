import logging
from typing import Any


def log_catalog_operation(
    operation: str,
    success: bool = True,
    logger_name: str = "bookcatalog.catalog",
    **kwargs: Any,
) -> None:
    """Log catalog operations.

    Args:
        operation: Catalog operation (create, update, delete)
        success: Whether the operation was successful
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {"operation": operation, "success": success, **kwargs}

    level = logging.INFO if success else logging.WARNING
    status = "succeeded" if success else "failed"

    logger.log(level, f"Catalog {operation} {status}", extra=log_data)


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "bookcatalog.validation"
) -> None:
    """Log validation errors with context.

    Args:
        field: Field name that failed validation
        value: The invalid value (truncated)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    safe_value = str(value)[:100]

    logger.warning(
        f"Validation failed for field '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )
