"""
wilayah.db.models

Persistence schema for the administrative hierarchy.

Responsibilities:
- Define the four hierarchy tables:
  - Province: top level, no parent
  - Regency: belongs to a province (`province_id`)
  - District: belongs to a regency (`regency_id`)
  - Village: belongs to a district (`district_id`)
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from wilayah.db.base import Base


class Province(Base):
    __tablename__ = "provinces"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)


class Regency(Base):
    __tablename__ = "regencies"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    province_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("provinces.id"), nullable=True, index=True
    )


class District(Base):
    __tablename__ = "districts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    regency_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("regencies.id"), nullable=True, index=True
    )


class Village(Base):
    __tablename__ = "villages"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    district_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("districts.id"), nullable=True, index=True
    )


# --- Module Notes -----------------------------------------------------------
# `sqlite_autoincrement` keeps ids monotonic: a deleted id is never handed out again.
# No relationship()/cascade is declared: deleting a parent leaves its children
# pointing at a missing row. SQLite does not enforce these foreign keys unless
# `PRAGMA foreign_keys=ON` is issued, which this service never does.
