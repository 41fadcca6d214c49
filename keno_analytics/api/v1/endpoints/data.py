"""Snapshot loading endpoints."""

from fastapi import APIRouter, Depends

from keno_analytics.api.deps import get_context
from keno_analytics.ingestion.context import IngestionContext

router = APIRouter()


@router.post("/reload")
async def reload(ctx: IngestionContext = Depends(get_context)):
    """Re-read every venue snapshot and the payout tables from disk."""
    ctx.clear()
    await ctx.load_all()
    return ctx.status()


@router.get("/status")
async def status(ctx: IngestionContext = Depends(get_context)):
    """Loaded venues, payout games and ingestion error count."""
    return ctx.status()


@router.get("/errors")
async def errors(ctx: IngestionContext = Depends(get_context)):
    return [e.model_dump() for e in ctx.errors]
