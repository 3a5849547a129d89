from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from books_api.core.exceptions import ValidationError
from books_api.core.utils import IDGenerator
from books_api.schemas.book import Book, BookCreate, BookUpdate
from books_api.storage import BookStore

# Error types pydantic reports for absent or empty values
_MISSING_TYPES = {"missing", "string_too_short"}


def _split_errors(exc: PydanticValidationError) -> tuple[list[str], list[str]]:
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        target = missing if error["type"] in _MISSING_TYPES else invalid
        if field not in target:
            target.append(field)
    return missing, invalid


class BookService:
    """
    Service for book business logic.
    """
    def __init__(self, store: BookStore, id_generator: IDGenerator):
        self._store = store
        self._id_gen = id_generator

    async def list_books(self) -> List[Book]:
        """
        List all books.
        """
        return self._store.list()

    async def get_book(self, book_id: str) -> Book:
        """
        Retrieve a book by ID.
        """
        return self._store.get(book_id)

    async def create_book(self, payload: Any) -> Book:
        """
        Validate ``payload`` and store it as a new book.

        The caller's id is kept when supplied, otherwise a fresh one is
        generated.
        """
        if payload is None:
            raise ValidationError("Bad Request: No data provided")
        if not isinstance(payload, dict):
            raise ValidationError("Bad Request: Invalid book data")

        try:
            new_book = BookCreate.model_validate(payload)
        except PydanticValidationError as e:
            missing, invalid = _split_errors(e)
            if missing:
                raise ValidationError(
                    f"Bad Request: Missing required fields: {', '.join(missing)}",
                    fields=missing,
                )
            raise ValidationError(
                f"Bad Request: Invalid fields: {', '.join(invalid)}",
                fields=invalid,
            )

        book_id = new_book.id or self._id_gen.next_id()
        book = Book(**new_book.model_dump(exclude={"id"}), id=book_id)
        return self._store.put(book_id, book)

    async def update_book(self, book_id: str, payload: Any) -> Book:
        """
        Merge the supplied fields of ``payload`` into an existing book.
        """
        if not book_id or not book_id.strip():
            raise ValidationError("ID is required")
        if not isinstance(payload, dict):
            raise ValidationError("Invalid book data")

        try:
            changes = BookUpdate.model_validate(payload).changes()
        except PydanticValidationError as e:
            missing, invalid = _split_errors(e)
            fields = missing + invalid
            raise ValidationError("Invalid book data", fields=fields)

        return self._store.merge(book_id, changes)

    async def delete_book(self, book_id: str) -> None:
        """
        Delete a book by ID.
        """
        self._store.delete(book_id)
