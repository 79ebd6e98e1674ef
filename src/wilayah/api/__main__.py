"""
wilayah.api.__main__

Entrypoint for running the service via `python -m wilayah.api`.
"""

from __future__ import annotations

import uvicorn

from wilayah.api.app import create_app
from wilayah.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# `log_config=None` leaves uvicorn's loggers on the root handler configured by
# `observability.logging`, so access and app events share one JSON stream.
# Settings come from `WILAYAH_*` env vars; the SQLite file lives wherever
# `WILAYAH_DATABASE_URL` points (default `./data/wilayah_indonesia.db`).
