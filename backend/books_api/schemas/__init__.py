"""Pydantic schemas."""
from books_api.schemas.book import Book, BookCreate, BookUpdate
from books_api.schemas.common import MessageResponse, StatusResponse

__all__ = ["Book", "BookCreate", "BookUpdate", "MessageResponse", "StatusResponse"]
