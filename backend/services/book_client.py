"""
Thin HTTP client for the books API using requests.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from domain.models import Book, BookNotFoundError
from settings import settings

JSON_HEADERS = {"Content-Type": "application/json"}


class BookClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
    ):
        base = base_url or settings.BOOKS_API_URL
        self.base_url = base.rstrip("/")
        # Anything with a requests-style ``request`` method works here,
        # including Starlette's TestClient.
        self.session = session or requests.Session()
        # Set timeout to None after construction to send no timeout at all.
        self.timeout = timeout if timeout is not None else settings.BOOKS_API_TIMEOUT
        self.logger = logging.getLogger(__name__)

    def _request(
        self,
        method: str,
        path: str,
        book_id: Optional[int] = None,
        payload: Optional[Mapping[str, Any]] = None,
    ):
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if payload is not None:
            kwargs["json"] = dict(payload)
            kwargs["headers"] = JSON_HEADERS
        resp = self.session.request(method, url, **kwargs)
        self.logger.debug("BookClient %s %s -> %s", method, url, resp.status_code)
        if resp.status_code == 404 and book_id is not None:
            raise BookNotFoundError(book_id)
        resp.raise_for_status()
        return resp

    def get_books(self) -> List[Book]:
        return self._request("GET", "/books").json()

    def get_book(self, book_id: int) -> Book:
        return self._request("GET", f"/books/{book_id}", book_id=book_id).json()

    def create_book(self, book: Mapping[str, Any]) -> Book:
        return self._request("POST", "/books", payload=book).json()

    def update_book(self, book_id: int, book: Mapping[str, Any]) -> Book:
        return self._request("PUT", f"/books/{book_id}", book_id=book_id, payload=book).json()

    def delete_book(self, book_id: int) -> None:
        # 204: nothing to parse
        self._request("DELETE", f"/books/{book_id}")

    def close(self) -> None:
        close = getattr(self.session, "close", None)
        if close is not None:
            close()
