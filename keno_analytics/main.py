"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from keno_analytics.config import settings
from keno_analytics.ingestion.context import IngestionContext

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
logger.add(str(settings.LOG_FILE), rotation="10 MB", retention="7 days", level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load venue snapshots on startup."""
    logger.info("Starting {} ...", settings.APP_NAME)

    ctx = IngestionContext.from_settings(settings)
    await ctx.load_all()
    app.state.ingestion = ctx
    if ctx.errors:
        logger.warning("{} snapshot(s) could not be loaded", len(ctx.errors))

    yield

    ctx.clear()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Keno draw-history analytics and payout probabilities",
    lifespan=lifespan,
)

# Include API routers
from keno_analytics.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "app": settings.APP_NAME}
