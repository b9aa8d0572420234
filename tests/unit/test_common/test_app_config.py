"""
Test Settings, Logging Config and CORS Parsing
"""

from crud_backend.config import Settings
from crud_backend.logging_config import build_logging_config
from crud_backend.main import parse_allowed_origins


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CACHE_STORE_TYPE", raising=False)
    settings = Settings(_env_file=None)

    assert settings.CACHE_STORE_TYPE == "database"
    assert settings.DEFAULT_PAGE_SIZE == 10
    assert settings.MAX_PAGE_SIZE == 1000
    assert settings.CACHE_TTL_SECONDS == 300


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CACHE_STORE_TYPE", "redis")
    monkeypatch.setenv("ACTIVITY_LOG_RETENTION_DAYS", "30")

    settings = Settings(_env_file=None)

    assert settings.CACHE_STORE_TYPE == "redis"
    assert settings.ACTIVITY_LOG_RETENTION_DAYS == 30


def test_logging_config_levels():
    config = build_logging_config("DEBUG")

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["crud_backend"] == {"level": "DEBUG", "propagate": True}
    assert config["loggers"]["pymongo"]["level"] == "WARNING"
    assert config["loggers"]["uvicorn.access"]["propagate"] is False


def test_allowed_origins():
    assert parse_allowed_origins(
        Settings(_env_file=None, ALLOWED_ORIGINS=" https://a.example , ,https://b.example")
    ) == ["https://a.example", "https://b.example"]
    assert parse_allowed_origins(Settings(_env_file=None, DEBUG=True, ALLOWED_ORIGINS="")) == [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    assert parse_allowed_origins(Settings(_env_file=None, DEBUG=False, ALLOWED_ORIGINS="")) == []
