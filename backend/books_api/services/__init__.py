"""Business logic services."""
from books_api.services.books import BookService

__all__ = ["BookService"]
