"""
wilayah.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with a round trip through the store.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text

from wilayah.api.deps import store_from_app
from wilayah.db.session import HierarchyStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(store: HierarchyStore = Depends(store_from_app)) -> dict[str, str]:
    # Goes through the same lock as every repository call.
    async with store.exclusive() as session:
        await session.execute(text("SELECT 1"))
    return {"status": "ready"}
