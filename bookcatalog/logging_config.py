import logging
from pathlib import Path

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .config import settings
from .constants import LOG_FILE_NAME


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the application.

    Log output goes to stderr (and optionally a file) so that the menu on
    stdout is never interleaved with log lines.

    Args:
        log_level: Override the log level from settings
    """
    # Determine log level
    if log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    elif settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level, logging.WARNING)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Console handler with Rich for better formatting
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=settings.debug,
        show_time=False,  # We handle time in formatter
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler when explicitly requested
    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set root logger level
    root_logger.setLevel(level)

    # Configure structlog
    configure_structlog(level)

    # Log configuration
    logger = get_logger(__name__)
    logger.debug("Logging configured", level=logging.getLevelName(level))


def configure_structlog(level: int = logging.DEBUG) -> None:
    """Configure structlog to render events and hand them to stdlib logging.

    Routing through stdlib keeps one set of handlers (Rich on stderr and
    the optional file) for structlog and plain logging calls alike. Until
    setup_logging runs, stdlib levels and the package NullHandler keep the
    catalog silent.
    """
    if settings.debug:
        # Development: Pretty key=value output
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        # Production: JSON payload inside the stdlib log line
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[structlog.processors.StackInfoRenderer(), renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


# Route structlog through stdlib until setup_logging runs
configure_structlog()
