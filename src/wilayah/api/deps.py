"""
wilayah.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the shared `HierarchyStore` created at startup.
- Build per-level repositories on top of it.
"""

from __future__ import annotations

from fastapi import Depends, Request

from wilayah.db.repositories.admin_data import AdminDataRepo
from wilayah.db.repositories.hierarchy import (
    HierarchyRepo,
    district_repo,
    province_repo,
    regency_repo,
    village_repo,
)
from wilayah.db.session import HierarchyStore


def store_from_app(request: Request) -> HierarchyStore:
    # Created once in the app lifespan (see `wilayah.api.app.create_app`).
    return request.app.state.store  # type: ignore[attr-defined]


def provinces(store: HierarchyStore = Depends(store_from_app)) -> HierarchyRepo:
    return province_repo(store)


def regencies(store: HierarchyStore = Depends(store_from_app)) -> HierarchyRepo:
    return regency_repo(store)


def districts(store: HierarchyStore = Depends(store_from_app)) -> HierarchyRepo:
    return district_repo(store)


def villages(store: HierarchyStore = Depends(store_from_app)) -> HierarchyRepo:
    return village_repo(store)


def admin_data(store: HierarchyStore = Depends(store_from_app)) -> AdminDataRepo:
    return AdminDataRepo(store)
