"""Book API routes."""
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from books_api.core.exceptions import ValidationError
from books_api.dependencies import get_book_service
from books_api.schemas.book import Book
from books_api.schemas.common import MessageResponse
from books_api.services.books import BookService

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=List[Book])
@router.get("/", response_model=List[Book], include_in_schema=False)
async def list_books(
    service: BookService = Depends(get_book_service),
) -> List[Book]:
    """Retrieve all books."""
    return await service.list_books()


@router.get("/{book_id}", response_model=Book)
async def get_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Retrieve a specific book by ID."""
    return await service.get_book(book_id)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
@router.post(
    "/", response_model=Book, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
async def create_book(
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> Book:
    """Add a new book. An id is generated when the payload has none."""
    return await service.create_book(payload)


@router.put("/", include_in_schema=False)
async def update_book_without_id() -> None:
    raise ValidationError("ID is required")


@router.delete("/", include_in_schema=False)
async def delete_book_without_id() -> None:
    # No id names no book; same page as any other unmatched path
    raise HTTPException(status_code=404)


@router.put("/{book_id}", response_model=MessageResponse)
async def update_book(
    book_id: str,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> dict:
    """Merge the supplied fields into an existing book."""
    await service.update_book(book_id, payload)
    return {"message": "Book updated successfully"}


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> None:
    """Delete a book by ID."""
    await service.delete_book(book_id)
