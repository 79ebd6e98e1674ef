"""
wilayah.api.routers.levels

Routers for provinces, regencies, districts and villages.

Responsibilities:
- Mount the shared CRUD routes per level (`/provinces`, `/regencies`, ...).
- Mount parent → children listings and `/villages/{id}/details`.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from starlette.status import HTTP_404_NOT_FOUND

from wilayah import schemas
from wilayah.api import deps
from wilayah.api.errors import storage_call
from wilayah.api.routers.hierarchy import Level, PathId, build_level_router
from wilayah.db.repositories.admin_data import AdminDataRepo

PROVINCE = Level("Province", "province", "provinces", schemas.Province, deps.provinces)
REGENCY = Level("Regency", "regency", "regencies", schemas.Regency, deps.regencies)
DISTRICT = Level("District", "district", "districts", schemas.District, deps.districts)
VILLAGE = Level("Village", "village", "villages", schemas.Village, deps.villages)

provinces_router = build_level_router(PROVINCE, list_all=True, children=REGENCY)
regencies_router = build_level_router(REGENCY, children=DISTRICT)
districts_router = build_level_router(DISTRICT, children=VILLAGE)
villages_router = build_level_router(VILLAGE)


@villages_router.get("/{id}/details", response_model=schemas.FullAdminData)
async def get_village_details(
    id: PathId, repo: AdminDataRepo = Depends(deps.admin_data)
) -> schemas.FullAdminData:
    with storage_call("fetch admin data"):
        data = await repo.get_full_admin_data(id)
    if data is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Village not found")
    return data


routers = (provinces_router, regencies_router, districts_router, villages_router)
