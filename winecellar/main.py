"""FastAPI application entry point for the wine cellar."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from winecellar import __version__
from winecellar.config import WineCellarConfig, get_settings
from winecellar.database import connect
from winecellar.log import configure_logging
from winecellar.routers import wines
from winecellar.seed import setup
from winecellar.store import WineStore

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("winecellar.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        access_logger.info(
            "%s %s %d %.3f ms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Connects to MongoDB and seeds the database before the first request,
    unless a store was injected when the application was created.
    """
    config: WineCellarConfig = app.state.config
    configure_logging(config.logging.level)

    owns_store = app.state.store is None
    if owns_store:
        db = config.database
        # StoreConnectionError propagates and aborts startup
        store = await connect(db.host, db.port, db.db, timeout_ms=db.connect_timeout_ms)
        await setup(config, store)
        app.state.store = store

    logger.info("Serving %s on port %s", config.app_name, config.server.port)

    yield

    if owns_store:
        await app.state.store.close()
        app.state.store = None


def create_app(
    config: WineCellarConfig | None = None,
    store: WineStore | None = None,
) -> FastAPI:
    """Create the application.

    Args:
        config: Configuration to use. Defaults to the global settings.
        store: Store to serve from. When omitted, the lifespan handler
               connects to MongoDB and runs the seed loader.
    """
    config = config or get_settings().config

    app = FastAPI(
        title=config.app_name,
        description="Wine cellar CRUD API backed by MongoDB",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = store

    if config.logging.access_log:
        app.add_middleware(RequestLoggingMiddleware)

    @app.get("/health", tags=["Health"])
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse(
            content={
                "status": "healthy",
                "version": __version__,
                "app_name": config.app_name,
            }
        )

    app.include_router(wines.router, prefix="/wines", tags=["Wines"])

    # Mounted after routes so the API takes precedence over files
    static_dir = config.server.static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="public")
    else:
        logger.warning("Static directory %s not found, static file serving disabled", static_dir)

    return app


app = create_app()
