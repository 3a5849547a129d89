"""
In-memory book store keyed by id.
"""
from threading import Lock
from typing import Any, Dict, List

from books_api.core.exceptions import NotFoundError
from books_api.schemas.book import Book


class BookStore:
    """
    Thread-safe in-memory book store.

    Records handed out are copies; the only way to change stored state is
    through ``put``, ``merge`` and ``delete``.
    """
    def __init__(self):
        self._storage: Dict[str, Book] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return book_id in self._storage

    def list(self) -> List[Book]:
        with self._lock:
            return [book.model_copy() for book in self._storage.values()]

    def get(self, book_id: str) -> Book:
        with self._lock:
            try:
                return self._storage[book_id].model_copy()
            except KeyError:
                raise NotFoundError("Book", book_id)

    def put(self, book_id: str, book: Book) -> Book:
        """Insert or replace the record at ``book_id``."""
        stored = book.model_copy(update={"id": book_id})
        with self._lock:
            self._storage[book_id] = stored
        return stored.model_copy()

    def merge(self, book_id: str, partial: Dict[str, Any]) -> Book:
        """Shallow-merge known fields of ``partial`` into the existing record."""
        changes = {
            name: value
            for name, value in partial.items()
            if name in Book.model_fields and name != "id"
        }
        with self._lock:
            if book_id not in self._storage:
                raise NotFoundError("Book", book_id)
            merged = self._storage[book_id].model_copy(update=changes)
            self._storage[book_id] = merged
        return merged.model_copy()

    def delete(self, book_id: str) -> None:
        with self._lock:
            if book_id not in self._storage:
                raise NotFoundError("Book", book_id)
            del self._storage[book_id]
