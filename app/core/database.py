"""Async SQLAlchemy 2.0 database lifecycle.

The engine is owned by a ``Database`` object that the application opens on
startup and disposes on shutdown. Request handlers receive it through
``get_database`` instead of reaching for a module-level client.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class Database:
    """Owns the async engine and the session factory built on it."""

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a database handle from application settings."""
        return cls(settings.database_url, echo=settings.debug)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> None:
        """Create the engine and session factory (no connection is made yet)."""
        if self._engine is not None:
            return
        self._engine = create_async_engine(
            self.url,
            echo=self.echo,
            pool_pre_ping=True,
        )
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("database.opened")

    async def close(self) -> None:
        """Dispose the engine and its connection pool."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("database.closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session that commits on success and rolls back on error.

        Yields:
            AsyncSession bound to this database.

        Raises:
            RuntimeError: If the database has not been opened.
        """
        if self._session_maker is None:
            raise RuntimeError("Database is not open")
        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Run a trivial query to check connectivity."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))


def get_database(request: Request) -> Database:
    """Dependency returning the database opened during application startup."""
    database: Database = request.app.state.database
    return database
