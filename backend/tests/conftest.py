import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def books_db():
    from repositories import BookCollection

    return BookCollection()


@pytest.fixture
def client(books_db):
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from api.database import get_books_db
    from api.routes import books as books_router

    app = FastAPI()
    app.include_router(books_router.router, prefix="/books")
    app.dependency_overrides[get_books_db] = lambda: books_db
    return TestClient(app)


@pytest.fixture
def book_client(client):
    from services.book_client import BookClient

    books = BookClient(base_url="http://testserver", session=client)
    # TestClient warns on per-request timeouts
    books.timeout = None
    return books
