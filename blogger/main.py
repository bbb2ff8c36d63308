"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, starlette, blogger.api, blogger.observability, blogger.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from pathlib import Path

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from starlette.staticfiles import StaticFiles

from blogger.configs import Settings, get_settings
from blogger.api import api_router
from blogger.api.routers.router_utils import register_exception_handlers
from blogger.boundary.db import create_all, get_async_engine, get_async_session_factory
from blogger.observability.logger import configure_logging
from blogger.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the database engine and session factory once, creates missing
    tables, and disposes the engine on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    engine = get_async_engine(settings.database)
    try:
        if settings.database.create_tables:
            await create_all(engine)
            logger.info("Database tables ensured")
    except Exception as e:
        logger.exception(
            "Failed to initialize database",
            extra={"error": str(e)},
        )
        await engine.dispose()
        raise

    app.state.engine = engine
    app.state.session_factory = get_async_session_factory(engine)
    logger.info("Application startup complete")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Application shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to build the app with (defaults to get_settings())

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Dirty Little Blogger",
        description="Blog with session login, posts, comments and authors",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Signed session cookie (added before the observability middleware so
    # it runs inside them)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session.secret_key,
        session_cookie=settings.session.cookie_name,
        max_age=settings.session.max_age,
        same_site=settings.session.same_site,
        https_only=settings.session.https_only,
    )

    # Add observability middleware (added last = first to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register API routes
    app.include_router(api_router)

    # Remaining paths fall through to the static client
    public_dir = Path(settings.blog.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning("Public directory missing", extra={"path": str(public_dir)})

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn using the server settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blogger.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
