"""Run the books API with uvicorn.

Usage:
    python -m scripts.serve [--host 127.0.0.1] [--port 5000] [--reload]

Defaults come from BOOKS_API_HOST / BOOKS_API_PORT (see settings.py).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

import uvicorn

from settings import settings

logger = logging.getLogger("serve")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the in-memory books API.")
    parser.add_argument("--host", default=settings.BOOKS_API_HOST, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=settings.BOOKS_API_PORT, help="Port to bind.")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (resets the collection).")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level.")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.info("Serving books API on http://%s:%d", args.host, args.port)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
