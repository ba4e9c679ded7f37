import os

# Basic settings helper to read environment configuration.


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.BOOKS_API_URL: str = os.getenv("BOOKS_API_URL", "http://localhost:5000")
        self.BOOKS_API_HOST: str = os.getenv("BOOKS_API_HOST", "127.0.0.1")
        self.BOOKS_API_PORT: int = int(os.getenv("BOOKS_API_PORT", "5000"))
        self.BOOKS_API_TIMEOUT: float = float(os.getenv("BOOKS_API_TIMEOUT", "5.0"))
        # Hardened behaviours; both off to match the reference API.
        self.BOOKS_MONOTONIC_IDS: bool = _as_bool(os.getenv("BOOKS_MONOTONIC_IDS"), False)
        self.BOOKS_IMMUTABLE_IDS: bool = _as_bool(os.getenv("BOOKS_IMMUTABLE_IDS"), False)
        self.CORS_ALLOW_ORIGINS: list[str] = _as_list(os.getenv("CORS_ALLOW_ORIGINS"), ["*"])
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
