"""Walk a running books API through a full create/read/update/delete cycle.

Usage:
    python -m scripts.demo_client [--base-url http://localhost:5000]

Lists the books, creates one, fetches it, renames it, deletes it and lists
again so the final listing matches the first.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

import requests

from services.book_client import BookClient
from settings import settings

logger = logging.getLogger("demo_client")

DEMO_BOOK = {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exercise the books API end to end.")
    parser.add_argument("--base-url", default=settings.BOOKS_API_URL, help="Books API base URL.")
    parser.add_argument("--timeout", type=float, default=settings.BOOKS_API_TIMEOUT, help="Per-request timeout in seconds.")
    parser.add_argument("--title", default=DEMO_BOOK["title"], help="Title of the book to create.")
    parser.add_argument("--author", default=DEMO_BOOK["author"], help="Author of the book to create.")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level.")
    return parser


def run_demo(client: BookClient, book: Dict[str, Any]) -> Dict[str, Any]:
    """Run the walkthrough and return what each step saw."""
    books = client.get_books()
    logger.info("All books: %s", books)

    new_book = client.create_book(book)
    logger.info("New book created: %s", new_book)

    fetched = client.get_book(new_book["id"])
    logger.info("Retrieved book: %s", fetched)

    updated = client.update_book(new_book["id"], {"title": f"{book['title']} (Updated)"})
    logger.info("Updated book: %s", updated)

    client.delete_book(new_book["id"])
    logger.info("Book deleted")

    final_books = client.get_books()
    logger.info("Updated book list: %s", final_books)

    return {
        "books": books,
        "created": new_book,
        "fetched": fetched,
        "updated": updated,
        "final_books": final_books,
    }


def main(argv: Optional[list[str]] = None, client: Optional[BookClient] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    client = client or BookClient(base_url=args.base_url, timeout=args.timeout)
    try:
        run_demo(client, {"title": args.title, "author": args.author})
    except requests.RequestException as exc:
        logger.error("Books API request failed: %s", exc)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
