"""FastAPI application entry point."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routers import bookmarks, health
from core.config import get_settings
from core.exceptions import register_exception_handlers
from core.logging_config import configure_logging
from db.session import create_tables, engine


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
    """Configure logging and the schema on startup; release the pool on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.create_tables:
        await create_tables()
        logger.info("Database tables created")
    logger.info("Bookmarks API started (environment=%s)", settings.environment)
    yield
    await engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Bookmarks API",
    description="Create, read, update and delete rated bookmarks.",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(bookmarks.router, prefix=get_settings().api_prefix)
