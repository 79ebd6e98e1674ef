"""
wilayah.api

API package for the hierarchy service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Handlers stay thin: decode path/body, call one repository operation, map the outcome.
