"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload --port 5000
"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books
from settings import settings

logger = logging.getLogger(__name__)

# Create app
app = FastAPI(
    title="Bookshelf API",
    description="In-memory book collection with list/get/create/update/delete",
    version="0.1.0",
)

# CORS middleware for browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials="*" not in settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(books.router, prefix="/books", tags=["books"])


@app.middleware("http")
async def request_log_middleware(request: Request, call_next):
    """Log method, path, status and latency for every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Bookshelf API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
