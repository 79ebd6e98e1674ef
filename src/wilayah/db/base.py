"""
wilayah.db.base

SQLAlchemy declarative base.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# All hierarchy tables inherit from `Base`; `init_db` creates whatever is registered
# on `Base.metadata`, so a new level only needs its model imported in `db.models`.
