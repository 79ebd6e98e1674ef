"""
wilayah.schemas

Typed values exchanged between the repositories and the API layer.

Responsibilities:
- Entity values (`Province`, `Regency`, `District`, `Village`): `id` is None on
  create input and always set on values read back from the store.
- `FullAdminData`: the derived ancestor chain of one village.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# SQLite INTEGER is a signed 64-bit value; anything wider never reaches the driver.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

RowId = Annotated[int, Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


class _Entity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: RowId | None = None
    code: str
    name: str


class Province(_Entity):
    pass


class Regency(_Entity):
    province_id: RowId | None = None


class District(_Entity):
    regency_id: RowId | None = None


class Village(_Entity):
    district_id: RowId | None = None


class CreatedResponse(BaseModel):
    id: int


class FullAdminData(BaseModel):
    # Wire names follow the established client contract: regency is "city",
    # district is "region".

    province_code: str
    province_name: str
    regency_code: str = Field(serialization_alias="city_code")
    regency_name: str = Field(serialization_alias="city_name")
    district_code: str = Field(serialization_alias="region_code")
    district_name: str = Field(serialization_alias="region_name")
    village_code: str
    village_name: str


# --- Module Notes -----------------------------------------------------------
# Field order in FullAdminData is part of the response shape; keep it aligned
# with the column order selected in `db.repositories.admin_data`.
