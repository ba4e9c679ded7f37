from settings import Settings


def test_defaults(monkeypatch):
    for name in (
        "BOOKS_API_URL",
        "BOOKS_API_PORT",
        "BOOKS_MONOTONIC_IDS",
        "BOOKS_IMMUTABLE_IDS",
        "CORS_ALLOW_ORIGINS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.BOOKS_API_URL == "http://localhost:5000"
    assert s.BOOKS_API_PORT == 5000
    assert s.BOOKS_MONOTONIC_IDS is False
    assert s.BOOKS_IMMUTABLE_IDS is False
    assert s.CORS_ALLOW_ORIGINS == ["*"]
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKS_API_PORT", "8081")
    monkeypatch.setenv("BOOKS_MONOTONIC_IDS", "yes")
    monkeypatch.setenv("BOOKS_IMMUTABLE_IDS", "1")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings()
    assert s.BOOKS_API_PORT == 8081
    assert s.BOOKS_MONOTONIC_IDS is True
    assert s.BOOKS_IMMUTABLE_IDS is True
    assert s.CORS_ALLOW_ORIGINS == ["http://a.test", "http://b.test"]
    assert s.LOG_LEVEL == "DEBUG"
