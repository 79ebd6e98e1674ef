"""
wilayah.db.init_db

Schema bootstrap.

Responsibilities:
- Create the parent directory of a file-backed SQLite database.
- Create the hierarchy tables if they don't exist.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine

from wilayah.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from wilayah.db.base import Base


def ensure_database_dir(database_url: str) -> None:
    url = make_url(database_url)
    # In-memory databases have no file to place.
    if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


async def init_db(engine: AsyncEngine) -> None:
    """
    Create all tables if they don't exist. There is no migration tooling;
    `create_all` only adds missing tables and never alters existing ones.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
