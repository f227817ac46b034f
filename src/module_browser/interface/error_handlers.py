"""Global exception handlers — translate uncaught errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from module_browser.domain.exceptions import (
    ContentDecodingError,
    InvalidFileNameError,
    InvalidModulePathError,
    InvalidProviderError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[Exception], int]] = [
    (InvalidModulePathError, 422),
    (InvalidFileNameError, 422),
    (InvalidProviderError, 500),
    (ContentDecodingError, 500),
    (httpx.HTTPError, 502),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain and upstream exceptions ──────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                logger.warning("%s: %s", type(exc).__name__, exc)
                return _error_json(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    @app.exception_handler(HTTPException)
    async def http_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_json(exc.status_code, str(exc.detail))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
