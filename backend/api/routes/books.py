"""
Books API routes.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.database import get_books_db
from domain.models import BOOK_NOT_FOUND_MESSAGE, BookNotFoundError
from repositories import BookCollection

router = APIRouter()
logger = logging.getLogger(__name__)


class MessageResponse(BaseModel):
    message: str


NOT_FOUND_RESPONSES = {404: {"model": MessageResponse, "description": BOOK_NOT_FOUND_MESSAGE}}


def not_found_response(exc: BookNotFoundError) -> JSONResponse:
    """Fixed 404 body shared by every per-book route."""
    logger.info("Book %s not found", exc.book_id)
    return JSONResponse(status_code=404, content={"message": BOOK_NOT_FOUND_MESSAGE})


@router.get("", response_model=List[Dict[str, Any]])
async def list_books(books_db: BookCollection = Depends(get_books_db)):
    """List all books in insertion order."""
    return books_db.list_books()


@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_book(
    data: Dict[str, Any] = Body(...),
    books_db: BookCollection = Depends(get_books_db),
):
    """Create a new book. Any ``id`` in the body is replaced."""
    return books_db.create_book(data)


@router.get("/{book_id}", response_model=Dict[str, Any], responses=NOT_FOUND_RESPONSES)
async def get_book(book_id: int, books_db: BookCollection = Depends(get_books_db)):
    """Get a book by ID."""
    try:
        return books_db.get_book(book_id)
    except BookNotFoundError as exc:
        return not_found_response(exc)


@router.put("/{book_id}", response_model=Dict[str, Any], responses=NOT_FOUND_RESPONSES)
async def update_book(
    book_id: int,
    data: Dict[str, Any] = Body(...),
    books_db: BookCollection = Depends(get_books_db),
):
    """Merge the body's fields into an existing book."""
    try:
        return books_db.update_book(book_id, data)
    except BookNotFoundError as exc:
        return not_found_response(exc)


@router.delete("/{book_id}", status_code=204, response_class=Response)
async def delete_book(book_id: int, books_db: BookCollection = Depends(get_books_db)):
    """Delete a book. Unknown ids are not an error."""
    books_db.delete_book(book_id)
    return Response(status_code=204)
