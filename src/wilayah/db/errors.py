"""
wilayah.db.errors

Error taxonomy for the persistence layer.

Responsibilities:
- `StorageError`: any engine/driver failure, with the original error chained.
- `NotFoundError`: an update or delete matched zero rows.
"""

from __future__ import annotations


class StorageError(Exception):
    pass


class NotFoundError(Exception):
    pass
