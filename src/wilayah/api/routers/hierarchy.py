"""
wilayah.api.routers.hierarchy

Router factory shared by the four hierarchy levels.

Responsibilities:
- Build list/get/create/update/delete routes for one level.
- Optionally mount the "children of this row" listing.
"""

# No `from __future__ import annotations` here: FastAPI must see the concrete
# value types that are closed over by the route functions below.

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from wilayah.api.errors import storage_call
from wilayah.db.repositories.hierarchy import HierarchyRepo
from wilayah.schemas import SQLITE_INT_MAX, SQLITE_INT_MIN, CreatedResponse

# Out-of-range ids are rejected with 422 before any repository call.
PathId = Annotated[int, Path(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


@dataclass(frozen=True, slots=True)
class Level:
    # e.g. label="Province", singular="province", plural="provinces"
    label: str
    singular: str
    plural: str
    value_type: type[BaseModel]
    repo: Callable[..., HierarchyRepo]


def build_level_router(
    level: Level,
    *,
    list_all: bool = False,
    children: Level | None = None,
) -> APIRouter:
    router = APIRouter(prefix=f"/{level.plural}", tags=[level.plural])
    value_type = level.value_type
    missing = f"{level.label} not found"

    if list_all:

        @router.get("", response_model=list[value_type])
        async def list_rows(repo: HierarchyRepo = Depends(level.repo)):
            with storage_call(f"fetch {level.plural}"):
                return await repo.list_all()

    @router.post("", status_code=HTTP_201_CREATED, response_model=CreatedResponse)
    async def create_row(body: value_type, repo: HierarchyRepo = Depends(level.repo)):
        with storage_call(f"create {level.singular}"):
            new_id = await repo.create(body)
        return CreatedResponse(id=new_id)

    @router.get("/{id}", response_model=value_type)
    async def get_row(id: PathId, repo: HierarchyRepo = Depends(level.repo)):
        with storage_call(f"fetch {level.singular}"):
            row = await repo.get(id)
        if row is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=missing)
        return row

    @router.put("/{id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
    async def update_row(id: PathId, body: value_type, repo: HierarchyRepo = Depends(level.repo)):
        with storage_call(f"update {level.singular}", missing=missing):
            await repo.update(id, body)
        return Response(status_code=HTTP_204_NO_CONTENT)

    @router.delete("/{id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
    async def delete_row(id: PathId, repo: HierarchyRepo = Depends(level.repo)):
        with storage_call(f"delete {level.singular}", missing=missing):
            await repo.delete(id)
        return Response(status_code=HTTP_204_NO_CONTENT)

    if children is not None:

        @router.get(f"/{{id}}/{children.plural}", response_model=list[children.value_type])
        async def list_children(id: PathId, repo: HierarchyRepo = Depends(children.repo)):
            # The parent itself is not looked up; an unknown id simply has no children.
            with storage_call(f"fetch {children.plural}"):
                return await repo.list_by_parent(id)

    return router
