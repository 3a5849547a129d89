"""API routes."""
from fastapi import APIRouter

from books_api.api import books, health

api_router = APIRouter()
api_router.include_router(books.router)
api_router.include_router(health.router)

__all__ = ["api_router"]
