"""Unit tests for database configuration and logging setup."""

import json
import logging

import pytest
import structlog

from numbers_core.core.logging import log_context, setup_logging
from numbers_core.database.base import (
    DatabaseConfig,
    DatabaseManager,
    close_database,
    get_database,
    init_database,
    to_async_url,
)


class TestDatabaseConfig:
    """Tests for DatabaseConfig."""

    def test_defaults(self):
        config = DatabaseConfig()

        assert config.database_url.startswith("sqlite+aiosqlite")
        assert config.pool_size == 5

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://numbers:secret@db:5432/numbers")
        monkeypatch.setenv("DB_POOL_SIZE", "20")
        monkeypatch.setenv("DB_ECHO", "true")

        config = DatabaseConfig.from_env()

        assert config.database_url == "postgresql://numbers:secret@db:5432/numbers"
        assert config.pool_size == 20
        assert config.max_overflow == 10
        assert config.echo is True

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("postgresql://u@h/db", "postgresql+asyncpg://u@h/db"),
            ("mysql://u@h/db", "mysql+aiomysql://u@h/db"),
            ("sqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
            ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
        ],
    )
    def test_to_async_url(self, url, expected):
        assert to_async_url(url) == expected

    def test_manager_from_config(self):
        manager = DatabaseManager.from_config(DatabaseConfig(database_url="sqlite:///:memory:"))

        assert manager.database_url == "sqlite+aiosqlite:///:memory:"
        assert manager.is_sqlite is True


class TestGlobalDatabase:
    """Tests for the global manager."""

    @pytest.mark.asyncio
    async def test_init_get_close(self):
        manager = init_database("sqlite:///:memory:")

        assert get_database() is manager
        assert await manager.health_check() is True

        await close_database()

        with pytest.raises(RuntimeError):
            get_database()


class TestLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        yield
        structlog.reset_defaults()
        for handler in logging.getLogger().handlers[:]:
            logging.getLogger().removeHandler(handler)

    def test_json_output(self, capsys):
        setup_logging(level="INFO", format="json", service_name="numbers-test")

        with log_context(account_sid="AC123"):
            structlog.get_logger("numbers.test").info("numbers_listed", count=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "numbers_listed"
        assert entry["count"] == 2
        assert entry["account_sid"] == "AC123"
        assert entry["service"] == "numbers-test"
        assert entry["level"] == "info"

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging(level="LOUD", format="json")
