"""BookStore tests."""
import pytest

from books_api.core.exceptions import NotFoundError
from books_api.schemas.book import Book
from books_api.storage import BookStore


def _book(book_id: str = "1", **overrides) -> Book:
    fields = {
        "id": book_id,
        "title": "Solaris",
        "author": "Stanislaw Lem",
        "genre": "Science Fiction",
        "year": 1961,
        "summary": "Scientists study a sentient ocean.",
    }
    fields.update(overrides)
    return Book(**fields)


def test_put_and_get():
    store = BookStore()
    store.put("1", _book())
    assert store.get("1") == _book()
    assert "1" in store
    assert len(store) == 1


def test_put_forces_record_id_to_key():
    store = BookStore()
    stored = store.put("abc", _book("xyz"))
    assert stored.id == "abc"
    assert store.get("abc").id == "abc"
    assert "xyz" not in store


def test_put_replaces_existing():
    store = BookStore()
    store.put("1", _book())
    store.put("1", _book(title="Fiasco"))
    assert len(store) == 1
    assert store.get("1").title == "Fiasco"


def test_get_missing_raises():
    with pytest.raises(NotFoundError) as exc_info:
        BookStore().get("nope")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Book with id nope not found"


def test_returned_records_are_copies():
    store = BookStore()
    store.put("1", _book())
    fetched = store.get("1")
    fetched.title = "Changed"
    store.list()[0].year = 1
    assert store.get("1") == _book()


def test_list_returns_all():
    store = BookStore()
    for book_id in ("1", "2", "3"):
        store.put(book_id, _book(book_id))
    assert sorted(b.id for b in store.list()) == ["1", "2", "3"]


def test_merge_is_shallow_and_partial():
    store = BookStore()
    store.put("1", _book())
    merged = store.merge("1", {"year": 2020})
    assert merged.year == 2020
    assert merged.title == "Solaris"
    assert store.get("1") == merged


def test_merge_ignores_id_and_unknown_fields():
    store = BookStore()
    store.put("1", _book())
    merged = store.merge("1", {"id": "2", "isbn": "123", "genre": "Classic"})
    assert merged.id == "1"
    assert merged.genre == "Classic"
    assert not hasattr(merged, "isbn")
    assert "2" not in store


def test_merge_missing_raises():
    with pytest.raises(NotFoundError):
        BookStore().merge("1", {"year": 2020})


def test_delete():
    store = BookStore()
    store.put("1", _book())
    store.delete("1")
    assert "1" not in store
    with pytest.raises(NotFoundError):
        store.delete("1")
