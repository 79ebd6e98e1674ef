"""
wilayah.api.errors

Mapping of repository outcomes to HTTP responses.

Responsibilities:
- Render every error as `{"error": "<message>"}`.
- Translate `StorageError` into 500 and write-side `NotFoundError` into 404.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from wilayah.db.errors import NotFoundError, StorageError
from wilayah.observability.logging import get_logger

log = get_logger(__name__)


@contextmanager
def storage_call(action: str, *, missing: str | None = None) -> Iterator[None]:
    """
    Wrap a single repository call made by a handler.

    `action` completes the 500 message ("Failed to <action>: <cause>").
    `missing` is the 404 message used when an update/delete hit no row.
    """

    try:
        yield
    except NotFoundError as exc:
        raise HTTPException(
            status_code=HTTP_404_NOT_FOUND, detail=missing or "Not found"
        ) from exc
    except StorageError as exc:
        log.error("storage_failure", action=action, error=str(exc), exc_info=True)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}: {exc}"
        ) from exc


async def _http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def _storage_error(_: Request, exc: StorageError) -> JSONResponse:
    # Reached only by callers that do not wrap their calls in `storage_call`.
    log.error("storage_failure", error=str(exc), exc_info=exc)
    return JSONResponse(
        {"error": f"Storage failure: {exc}"}, status_code=HTTP_500_INTERNAL_SERVER_ERROR
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(StorageError, _storage_error)
