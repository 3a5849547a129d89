"""Seed the book store from a JSON file."""
import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from books_api.core.exceptions import StartupLoadError
from books_api.core.logging import get_logger
from books_api.schemas.book import Book
from books_api.storage import BookStore

logger = get_logger("loader")


def load_books(store: BookStore, path: Union[str, Path]) -> int:
    """
    Read a JSON array of books from ``path`` and put each one in ``store``.

    Entries are stored in file order, so a bad entry leaves the ones before
    it loaded. Returns the number of books stored.

    Raises:
        StartupLoadError: unreadable file, invalid JSON, a top-level value
            that is not an array, or an entry that is not a valid book.
    """
    source = Path(path).expanduser().resolve()

    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise StartupLoadError(str(source), str(e)) from e

    try:
        entries = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StartupLoadError(str(source), f"invalid JSON: {e}") from e

    if not isinstance(entries, list):
        raise StartupLoadError(str(source), "expected a JSON array of books")

    loaded = 0
    for index, entry in enumerate(entries):
        try:
            book = Book.model_validate(entry)
        except PydanticValidationError as e:
            error = StartupLoadError(str(source), f"entry {index} is not a valid book: {e}")
            error.details["loaded"] = loaded
            raise error from e
        store.put(book.id, book)
        loaded += 1

    return loaded


def seed_store(store: BookStore, path: Union[str, Path]) -> int:
    """Load seed data, logging failures instead of raising them."""
    try:
        count = load_books(store, path)
    except StartupLoadError as e:
        logger.error(f"Error reading books file: {e.message}")
        return e.details.get("loaded", 0)

    logger.info(f"Loaded {count} book(s) from {path}")
    return count
