"""
wilayah.db.repositories.hierarchy

Generic CRUD repository for the four hierarchy levels.

Responsibilities:
- List rows (all, or by parent id), fetch one row, create, update, delete.
- Report update/delete against a missing id as `NotFoundError`.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, delete, select, update

from wilayah import schemas
from wilayah.db.base import Base
from wilayah.db.errors import NotFoundError
from wilayah.db.models import District, Province, Regency, Village
from wilayah.db.session import HierarchyStore

ModelT = TypeVar("ModelT", bound=Base)
ValueT = TypeVar("ValueT", bound=BaseModel)


class HierarchyRepo(Generic[ModelT, ValueT]):
    """
    One instance per hierarchy level. Levels differ only in table and parent
    column; `parent_column` is None for provinces.
    """

    def __init__(
        self,
        store: HierarchyStore,
        *,
        model: type[ModelT],
        value_type: type[ValueT],
        parent_column: str | None = None,
    ) -> None:
        self._store = store
        self._model = model
        self._value_type = value_type
        self._parent_column = parent_column
        self._id = model.__table__.c.id
        # Everything except the primary key is rewritten on update.
        self._fields = tuple(c.key for c in model.__table__.columns if not c.primary_key)

    @property
    def table(self) -> str:
        return self._model.__tablename__

    async def list_all(self) -> list[ValueT]:
        return await self._fetch_all(select(self._model))

    async def list_by_parent(self, parent_id: int) -> list[ValueT]:
        if self._parent_column is None:
            raise TypeError(f"{self.table} has no parent column")
        parent = self._model.__table__.c[self._parent_column]
        return await self._fetch_all(select(self._model).where(parent == parent_id))

    async def get(self, id: int) -> ValueT | None:
        stmt = select(self._model).where(self._id == id)
        async with self._store.exclusive() as session:
            row = (await session.execute(stmt)).scalar_one_or_none()
            if row is None:
                return None
            return self._value_type.model_validate(row)

    async def create(self, value: ValueT) -> int:
        # `id` on the input is ignored; the store assigns it.
        row = self._model(**self._values(value))
        async with self._store.exclusive() as session:
            session.add(row)
            await session.commit()
            return row.id

    async def update(self, id: int, value: ValueT) -> None:
        stmt = (
            update(self._model)
            .where(self._id == id)
            .values(**self._values(value))
            .execution_options(synchronize_session=False)
        )
        async with self._store.exclusive() as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise NotFoundError(f"{self.table} id={id} not found")
            await session.commit()

    async def delete(self, id: int) -> None:
        # No cascade: rows referencing this id are left as they are.
        stmt = (
            delete(self._model)
            .where(self._id == id)
            .execution_options(synchronize_session=False)
        )
        async with self._store.exclusive() as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise NotFoundError(f"{self.table} id={id} not found")
            await session.commit()

    async def _fetch_all(self, stmt: Select[Any]) -> list[ValueT]:
        async with self._store.exclusive() as session:
            rows = (await session.execute(stmt)).scalars().all()
            return [self._value_type.model_validate(r) for r in rows]

    def _values(self, value: ValueT) -> dict[str, Any]:
        return value.model_dump(include=set(self._fields))


def province_repo(store: HierarchyStore) -> HierarchyRepo[Province, schemas.Province]:
    return HierarchyRepo(store, model=Province, value_type=schemas.Province)


def regency_repo(store: HierarchyStore) -> HierarchyRepo[Regency, schemas.Regency]:
    return HierarchyRepo(
        store, model=Regency, value_type=schemas.Regency, parent_column="province_id"
    )


def district_repo(store: HierarchyStore) -> HierarchyRepo[District, schemas.District]:
    return HierarchyRepo(
        store, model=District, value_type=schemas.District, parent_column="regency_id"
    )


def village_repo(store: HierarchyStore) -> HierarchyRepo[Village, schemas.Village]:
    return HierarchyRepo(
        store, model=Village, value_type=schemas.Village, parent_column="district_id"
    )
