"""
In-memory database for the API.

The collection lives for the process lifetime; a restart resets it to the
seed records.
"""
from repositories import BookCollection
from settings import settings

# In-memory storage
books_db = BookCollection(
    monotonic_ids=settings.BOOKS_MONOTONIC_IDS,
    immutable_ids=settings.BOOKS_IMMUTABLE_IDS,
)


def get_books_db() -> BookCollection:
    """FastAPI dependency returning the process-wide collection."""
    return books_db
