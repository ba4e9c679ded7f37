"""
Book collection held in process memory.
"""
import copy
import logging
import threading
from typing import Any, Iterable, List, Mapping, Optional

from domain.models import SEED_BOOKS, Book, BookNotFoundError

logger = logging.getLogger(__name__)


class BookCollection:
    """Ordered, lock-guarded CRUD store for book records.

    Records are handed out as copies so callers can never mutate the stored
    state behind the lock.

    By default ids follow the reference API: a new book gets
    ``len(books) + 1`` and an ``id`` sent with an update overwrites the stored
    one. Both can collide with existing ids after deletes or updates.
    ``monotonic_ids`` switches to a counter that never reuses an id and
    ``immutable_ids`` drops ``id`` from update fields.
    """

    def __init__(
        self,
        books: Optional[Iterable[Mapping[str, Any]]] = None,
        monotonic_ids: bool = False,
        immutable_ids: bool = False,
    ):
        self.monotonic_ids = monotonic_ids
        self.immutable_ids = immutable_ids
        self._lock = threading.Lock()
        self._seed: List[Book] = copy.deepcopy(list(SEED_BOOKS if books is None else books))
        self._books: List[Book] = []
        self._next_id = 1
        self.reset()

    def reset(self) -> None:
        """Drop every change and go back to the initial records."""
        with self._lock:
            self._books = copy.deepcopy(self._seed)
            self._next_id = self._max_id() + 1
        logger.debug("Book collection reset to %d records", len(self._seed))

    def list_books(self) -> List[Book]:
        with self._lock:
            return copy.deepcopy(self._books)

    def get_book(self, book_id: int) -> Book:
        with self._lock:
            return copy.deepcopy(self._find(book_id))

    def create_book(self, fields: Mapping[str, Any]) -> Book:
        book = copy.deepcopy(dict(fields))
        with self._lock:
            if self.monotonic_ids:
                new_id = self._next_id
            else:
                new_id = len(self._books) + 1
            book["id"] = new_id
            self._books.append(book)
            self._next_id = max(self._next_id, new_id + 1)
            created = copy.deepcopy(book)
        logger.debug("Created book id=%s", new_id)
        return created

    def update_book(self, book_id: int, fields: Mapping[str, Any]) -> Book:
        changes = copy.deepcopy(dict(fields))
        if self.immutable_ids:
            changes.pop("id", None)
        with self._lock:
            book = self._find(book_id)
            book.update(changes)
            if isinstance(book.get("id"), int):
                self._next_id = max(self._next_id, book["id"] + 1)
            updated = copy.deepcopy(book)
        logger.debug("Updated book id=%s fields=%s", book_id, sorted(changes))
        return updated

    def delete_book(self, book_id: int) -> None:
        with self._lock:
            before = len(self._books)
            self._books = [b for b in self._books if b.get("id") != book_id]
            removed = before - len(self._books)
        logger.debug("Deleted book id=%s (%d removed)", book_id, removed)

    def _find(self, book_id: int) -> Book:
        # caller holds the lock
        book = next((b for b in self._books if b.get("id") == book_id), None)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def _max_id(self) -> int:
        ids = [b["id"] for b in self._books if isinstance(b.get("id"), int)]
        return max(ids, default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)
