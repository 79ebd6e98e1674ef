"""
wilayah.db

Persistence package (SQLAlchemy async over SQLite).

Responsibilities:
- Provide ORM models, the serialized store handle, and repositories.
"""

# Package marker.
