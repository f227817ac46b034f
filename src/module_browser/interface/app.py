"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from module_browser.interface.dependencies import shutdown, startup
from module_browser.interface.error_handlers import register_error_handlers
from module_browser.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Module Browser",
        version="1.0.0",
        description=(
            "Resolves a registered module name plus an optional branch/tag "
            "and file path into repository metadata, a directory listing or "
            "file content, and the README, using the GitHub or GitLab APIs."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)
    return app
