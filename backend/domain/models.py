"""
Core domain models for the bookshelf API.
These are framework-agnostic and shared by the repository, routes and client.
"""
from typing import Any, Dict, List

# A book is an open record: ``id``, ``title`` and ``author`` are the known
# fields, anything else a caller submits is kept as-is.
Book = Dict[str, Any]

BOOK_NOT_FOUND_MESSAGE = "Book not found"

SEED_BOOKS: List[Book] = [
    {"id": 1, "title": "To Kill a Mockingbird", "author": "Harper Lee"},
    {"id": 2, "title": "1984", "author": "George Orwell"},
]


class BookNotFoundError(LookupError):
    """No book in the collection carries the requested id."""

    def __init__(self, book_id: int):
        super().__init__(BOOK_NOT_FOUND_MESSAGE)
        self.book_id = book_id
