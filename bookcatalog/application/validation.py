"""Field validation with logging for the application layer.

The domain setters only answer yes or no; the menu uses these helpers to
tell the operator why a value was rejected.
"""

from typing import Any

from ..domain.entities import validate_field
from ..domain.exceptions import ValidationError
from ..logging_config import get_logger
from ..logging_utils import log_validation_error

logger = get_logger(__name__)


def field_error(field: str, value: Any) -> str | None:
    """Return the reason a value is rejected for a field, or None if valid.

    Args:
        field: Book field name (e.g. 'id', 'title')
        value: The raw value entered by the operator

    Returns:
        A human-readable error message, or None when the value is accepted
    """
    try:
        validate_field(field, value)
    except ValidationError as e:
        log_validation_error(field, value, str(e))
        logger.debug("Field rejected", field=field, attempted_value=repr(value))
        return str(e)
    return None
