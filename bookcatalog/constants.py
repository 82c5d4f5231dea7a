"""Infrastructure and technical constants."""

from typing import Final

DEFAULT_APP_NAME: Final = "Book Catalog"
DEFAULT_LOG_LEVEL: Final = "WARNING"
LOG_FILE_NAME: Final = "bookcatalog.log"
ENV_PREFIX: Final = "BOOKCATALOG_"
