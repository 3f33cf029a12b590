"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.config import get_settings
from blog.infrastructure.database import Base, engine
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.api.v1.router import router as api_v1_router
from blog.presentation.middleware import ForceHTMLMiddleware, RemoveTrailingSlashMiddleware
from blog.presentation.web.pages import not_found_page
from blog.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    settings = get_settings()
    setup_logging()

    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    yield

    await engine.dispose()


async def _http_error(request: Request, exc: StarletteHTTPException) -> Response:
    """Render the HTML 404 page for unmatched routes; defer everything else."""
    if exc.status_code == 404 and not request.url.path.startswith("/api"):
        return await not_found_page(request)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Added last runs first: slashes are stripped before routing sees the path.
    app.add_middleware(ForceHTMLMiddleware)
    app.add_middleware(RemoveTrailingSlashMiddleware)

    app.add_exception_handler(StarletteHTTPException, _http_error)

    app.include_router(api_v1_router, prefix="/api")
    app.include_router(web_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
