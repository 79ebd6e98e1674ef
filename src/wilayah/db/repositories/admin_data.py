"""
wilayah.db.repositories.admin_data

Read-only repository resolving a village to its full ancestor chain.

Responsibilities:
- Join village → district → regency → province in one query.
- Return None when any link in the chain is missing.
"""

from __future__ import annotations

from sqlalchemy import select

from wilayah.db.models import District, Province, Regency, Village
from wilayah.db.session import HierarchyStore
from wilayah.schemas import FullAdminData


class AdminDataRepo:
    def __init__(self, store: HierarchyStore) -> None:
        self._store = store

    async def get_full_admin_data(self, village_id: int) -> FullAdminData | None:
        # Inner joins only: a dangling parent reference drops the row entirely.
        stmt = (
            select(
                Province.code.label("province_code"),
                Province.name.label("province_name"),
                Regency.code.label("regency_code"),
                Regency.name.label("regency_name"),
                District.code.label("district_code"),
                District.name.label("district_name"),
                Village.code.label("village_code"),
                Village.name.label("village_name"),
            )
            .select_from(Village)
            .join(District, Village.district_id == District.id)
            .join(Regency, District.regency_id == Regency.id)
            .join(Province, Regency.province_id == Province.id)
            .where(Village.id == village_id)
        )
        async with self._store.exclusive() as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return FullAdminData(**row._mapping)


# --- Module Notes -----------------------------------------------------------
# The result is regenerated on every call; nothing derived is ever persisted.
