"""
tests.conftest

Shared fixtures: a fresh SQLite file per test, the serialized store on top of
it, and an ASGI client with the app lifespan entered explicitly.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from wilayah.api.app import create_app
from wilayah.db.init_db import ensure_database_dir, init_db
from wilayah.db.session import HierarchyStore, create_engine, create_sessionmaker
from wilayah.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    db_file = tmp_path / "data" / "wilayah_indonesia.db"
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{db_file}")


@pytest_asyncio.fixture
async def store(settings: Settings) -> AsyncIterator[HierarchyStore]:
    ensure_database_dir(settings.database_url)
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield HierarchyStore(create_sessionmaker(engine))
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
