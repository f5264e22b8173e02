"""
Database connection management.

Provides the Database store client (async engine + session factory) with an
explicit connect/dispose lifecycle, and the FastAPI dependency that hands a
request-scoped session out of the client stored on app.state.

Dependencies: sqlalchemy, course_records.configs
System role: Database connection lifecycle management
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from course_records.boundary.db.base import Base
from course_records.configs import DatabaseSettings

logger = logging.getLogger(__name__)


class Database:
    """
    Async store client owning one engine for the process lifetime.

    Constructed once in the application lifespan, stored on app.state and
    disposed on shutdown. Tests build their own instance against SQLite.

    Attributes:
        settings: Connection parameters
    """

    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Connected engine; raises if connect() has not run."""
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def connect(self) -> None:
        """
        Create the async engine and session factory.

        SQLite URLs get a StaticPool so an in-memory database is shared by
        every session; other backends get a sized connection pool with
        pre-ping to detect stale connections.
        """
        if self._engine is not None:
            return

        if self.settings.is_sqlite:
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        else:
            engine_kwargs = {
                "pool_size": self.settings.pool_size,
                "max_overflow": self.settings.max_overflow,
                "pool_timeout": self.settings.pool_timeout,
                "pool_pre_ping": True,
            }

        self._engine = create_async_engine(
            self.settings.url,
            echo=self.settings.echo_sql,
            **engine_kwargs,
        )
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Database engine created", extra={"dialect": self._engine.dialect.name})

    async def create_tables(self) -> None:
        """
        Create all tables registered with Base.metadata.

        Idempotent: existing tables are left unchanged.
        """
        # Import models to register them with Base.metadata
        from course_records.boundary.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def drop_tables(self) -> None:
        """Drop every registered table. Development and tests only."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """Run a trivial query; True when the store answers."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session; uncommitted work is rolled back on exit.

        Yields:
            AsyncSession: Session bound to this client's engine
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Close every pooled connection and forget the engine."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the process-wide store client."""
    return request.app.state.database


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @router.get("/courses/{id}")
        async def get_course(id: UUID, db: AsyncSession = Depends(get_async_db)):
            return await course_crud.get_by_id(db, id)
    """
    database = get_database(request)
    async with database.session() as session:
        yield session
