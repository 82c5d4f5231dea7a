"""Command line entry point for the book catalog menu."""

import typer

from .application.catalog import Catalog
from .config import settings
from .logging_config import get_logger, setup_logging
from .presentation.menu import BookMenu

app = typer.Typer(
    name="bookcatalog",
    help="""Book Catalog - manage an in-memory list of books from a text menu.

    Examples:
      bookcatalog                  - start the menu (capacity from settings)
      bookcatalog --capacity 10    - start the menu with room for 10 books
      bookcatalog --debug          - start the menu with debug logging
    """,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{settings.app_name} {settings.version}")
        raise typer.Exit()


@app.command()
def menu(
    capacity: int | None = typer.Option(
        None,
        "--capacity",
        help="Maximum number of books (non-positive values use the default)",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    no_clear: bool = typer.Option(
        False, "--no-clear", help="Do not clear the screen between menus"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Start the interactive book catalog menu."""
    setup_logging("DEBUG" if debug else None)
    logger = get_logger(__name__)

    catalog = Catalog(settings.effective_capacity if capacity is None else capacity)
    logger.debug("Starting menu", capacity=catalog.capacity)
    BookMenu(catalog, clear_screen=not no_clear).run()


def main():
    """Main entry point for the book catalog."""
    app()


if __name__ == "__main__":
    main()
