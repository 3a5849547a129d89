"""BookService tests."""
import pytest

from books_api.core.exceptions import NotFoundError, ValidationError
from books_api.core.utils import SequentialIDGenerator
from books_api.services.books import BookService
from books_api.storage import BookStore


@pytest.fixture
def service(store) -> BookService:
    return BookService(store, SequentialIDGenerator(start=10))


@pytest.mark.asyncio
async def test_create_uses_generator_when_id_blank(service, book_payload):
    book = await service.create_book({**book_payload, "id": ""})
    assert book.id == "10"
    book = await service.create_book(book_payload)
    assert book.id == "11"


@pytest.mark.asyncio
async def test_create_treats_empty_strings_as_missing(service, store, book_payload):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_book({**book_payload, "title": "", "genre": ""})
    assert exc_info.value.message == "Bad Request: Missing required fields: title, genre"
    assert exc_info.value.details == {"fields": ["title", "genre"]}
    assert len(store) == 0


@pytest.mark.asyncio
async def test_create_reports_wrong_types(service, book_payload):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_book({**book_payload, "year": "nineteen"})
    assert exc_info.value.message == "Bad Request: Invalid fields: year"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("payload, message", [
    (None, "Bad Request: No data provided"),
    ([], "Bad Request: Invalid book data"),
    ("title", "Bad Request: Invalid book data"),
])
async def test_create_rejects_non_objects(service, payload, message):
    with pytest.raises(ValidationError, match=message):
        await service.create_book(payload)


@pytest.mark.asyncio
async def test_update_skips_null_values(service, seeded_book):
    await service.update_book("42", {"title": None, "year": 1999})
    book = await service.get_book("42")
    assert book.title == seeded_book.title
    assert book.year == 1999


@pytest.mark.asyncio
async def test_update_empty_object_is_a_no_op(service, seeded_book):
    assert await service.update_book("42", {}) == seeded_book


@pytest.mark.asyncio
async def test_update_checks_id_before_body(service):
    with pytest.raises(ValidationError, match="ID is required"):
        await service.update_book("  ", None)


@pytest.mark.asyncio
async def test_update_missing_book(service):
    with pytest.raises(NotFoundError):
        await service.update_book("nope", {"year": 1})


@pytest.mark.asyncio
async def test_delete_then_list(service, seeded_book, book_payload):
    created = await service.create_book(book_payload)
    await service.delete_book("42")
    assert await service.list_books() == [created]


@pytest.mark.asyncio
async def test_services_share_the_store_they_are_given(book_payload):
    store = BookStore()
    first = BookService(store, SequentialIDGenerator())
    second = BookService(store, SequentialIDGenerator(prefix="x"))
    created = await first.create_book(book_payload)
    assert await second.get_book(created.id) == created
