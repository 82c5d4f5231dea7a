"""In-memory book catalog with a text menu front end."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
