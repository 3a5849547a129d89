"""
FastAPI dependencies for the book store and service.
"""
from fastapi import Depends, Request

from books_api.config import Settings
from books_api.services.books import BookService
from books_api.storage import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Dependency to get the store owned by the running application.
    """
    return request.app.state.store


def get_book_service(
    request: Request,
    store: BookStore = Depends(get_book_store),
) -> BookService:
    """
    Dependency provider for BookService.
    """
    return BookService(store, request.app.state.id_generator)


def get_app_settings(request: Request) -> Settings:
    """
    Dependency to get app settings.
    """
    return request.app.state.settings
