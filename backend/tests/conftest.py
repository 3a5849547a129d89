"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from books_api.config import Settings
from books_api.core.utils import SequentialIDGenerator
from books_api.main import create_app
from books_api.schemas.book import Book
from books_api.storage import BookStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a seed file that does not exist."""
    return Settings(books_data_path=str(tmp_path / "books.json"))


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def id_generator() -> SequentialIDGenerator:
    return SequentialIDGenerator(prefix="book-")


@pytest.fixture
def app(settings, store, id_generator):
    return create_app(settings=settings, store=store, id_generator=id_generator)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def book_payload() -> dict:
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "Science Fiction",
        "year": 1965,
        "summary": "A desert planet and the spice that binds an empire.",
    }


@pytest.fixture
def seeded_book(store, book_payload) -> Book:
    """A book already present in the store under id "42"."""
    return store.put("42", Book(id="42", **book_payload))
