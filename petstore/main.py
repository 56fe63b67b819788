from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from petstore.core.config import APP_VERSION, settings
from petstore.core.exceptions import register_exception_handlers
from petstore.core.logging import setup_logging
from petstore.delegates import StoreApiDelegate, load_delegate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    logger.info("%s serving store API under %s", settings.app_name, settings.api_base_path)
    yield
    # Shutdown
    close = getattr(app.state.store_delegate, "aclose", None)
    if close is not None:
        await close()


def create_app(delegate: StoreApiDelegate | None = None) -> FastAPI:
    """Build the application around ``delegate`` or the configured one."""
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=APP_VERSION,
        debug=settings.app_debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.store_delegate = delegate if delegate is not None else load_delegate(settings.store_delegate)

    register_exception_handlers(app)

    # Register routes
    from petstore.api.v2.router import api_v2_router

    app.include_router(api_v2_router, prefix=settings.api_base_path)

    return app


app = create_app()
