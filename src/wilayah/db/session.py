"""
wilayah.db.session

Async SQLAlchemy engine, session factory, and the serialized store handle.

Responsibilities:
- Create the async engine from settings.
- Create the async sessionmaker with safe defaults.
- Serialize every store operation behind a single lock (`HierarchyStore`).
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wilayah.db.errors import StorageError
from wilayah.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        pool_pre_ping=True,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps loaded rows readable after commit.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


class HierarchyStore:
    """
    Single shared access path to the hierarchy database.

    Every repository operation runs inside `exclusive()`: it waits for the
    lock, opens a session, runs its statement(s), and releases the lock before
    returning. No two operations ever execute statements at the same time.
    Driver/engine failures surface as `StorageError` with the cause chained.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[AsyncSession]:
        async with self._lock:
            try:
                async with self._session_factory() as session:
                    yield session
            except (SQLAlchemyError, OverflowError) as exc:
                # sqlite3 raises OverflowError for integers wider than 64 bits.
                raise StorageError(str(exc)) from exc


# --- Module Notes -----------------------------------------------------------
# SQLite allows one writer at a time, so a pool would only move contention into
# the driver. The lock keeps ordering explicit at the application level.
