"""
wilayah.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for the hierarchy store.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories never log or retry; callers decide how outcomes are reported.
