"""
Database Base Module

Provides the declarative base, configuration, and database management
infrastructure for the numbers data layer.
"""

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


logger = structlog.get_logger(__name__)


# =============================================================================
# Base Declarative Class
# =============================================================================


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


# =============================================================================
# Configuration
# =============================================================================


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    database_url: str = "sqlite+aiosqlite:///./numbers.db"
    pool_size: int = 5
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800
    echo: bool = False

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Create config from environment variables."""
        defaults = cls()
        return cls(
            database_url=os.environ.get("DATABASE_URL", defaults.database_url),
            pool_size=int(os.environ.get("DB_POOL_SIZE", defaults.pool_size)),
            max_overflow=int(os.environ.get("DB_MAX_OVERFLOW", defaults.max_overflow)),
            pool_timeout=int(os.environ.get("DB_POOL_TIMEOUT", defaults.pool_timeout)),
            pool_recycle=int(os.environ.get("DB_POOL_RECYCLE", defaults.pool_recycle)),
            echo=os.environ.get("DB_ECHO", "false").lower() == "true",
        )


def to_async_url(database_url: str) -> str:
    """Rewrite a sync driver URL to its async driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("mysql://"):
        return database_url.replace("mysql://", "mysql+aiomysql://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


# =============================================================================
# Database Manager
# =============================================================================


class DatabaseManager:
    """
    Database connection and session management.

    Sessions handed out by ``session()`` are never committed implicitly:
    mutating callers commit, read-only callers just leave the block.
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
        echo: bool = False,
    ):
        """
        Initialize database manager.

        Args:
            database_url: Database connection URL
            pool_size: Size of connection pool
            max_overflow: Max connections beyond pool size
            pool_timeout: Timeout for acquiring connection
            pool_recycle: Recycle connections after this many seconds
            echo: Echo SQL statements (for debugging)
        """
        self._database_url = to_async_url(database_url)
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._pool_timeout = pool_timeout
        self._pool_recycle = pool_recycle
        self._echo = echo

        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "DatabaseManager":
        return cls(
            config.database_url,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            pool_recycle=config.pool_recycle,
            echo=config.echo,
        )

    @property
    def database_url(self) -> str:
        return self._database_url

    @property
    def is_sqlite(self) -> bool:
        return self._database_url.startswith("sqlite")

    def _engine_options(self) -> Dict[str, Any]:
        if not self.is_sqlite:
            return {
                "pool_size": self._pool_size,
                "max_overflow": self._max_overflow,
                "pool_timeout": self._pool_timeout,
                "pool_recycle": self._pool_recycle,
            }
        # In-memory databases live as long as their single connection
        if ":memory:" in self._database_url or self._database_url.endswith("://"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {}

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine."""
        if self._engine is None:
            self._engine = create_async_engine(
                self._database_url,
                echo=self._echo,
                **self._engine_options(),
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a database session.

        Usage:
            async with db.session() as session:
                # use session
                await session.commit()
        """
        session = self.session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables (use with caution!)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("database_health_check_failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close the database connection."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


# =============================================================================
# Global Instance Management
# =============================================================================


_database: Optional[DatabaseManager] = None


def get_database() -> DatabaseManager:
    """Get the global database manager instance."""
    if _database is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _database


def init_database(
    database_url: Optional[str] = None,
    **kwargs,
) -> DatabaseManager:
    """
    Initialize the global database manager.

    Args:
        database_url: Database connection URL, read from the environment
            when omitted
        **kwargs: Additional arguments for DatabaseManager
    """
    global _database
    if database_url is None:
        _database = DatabaseManager.from_config(DatabaseConfig.from_env())
    else:
        _database = DatabaseManager(database_url, **kwargs)
    return _database


async def close_database() -> None:
    """Close the global database connection."""
    global _database
    if _database:
        await _database.close()
        _database = None


__all__ = [
    "Base",
    "DatabaseConfig",
    "DatabaseManager",
    "to_async_url",
    "get_database",
    "init_database",
    "close_database",
]
