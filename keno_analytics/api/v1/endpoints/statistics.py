"""Statistics API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from keno_analytics.api.deps import get_analysis_config, get_context
from keno_analytics.config import AnalysisConfig
from keno_analytics.ingestion.context import IngestionContext
from keno_analytics.services import statistics_service as stats
from keno_analytics.schemas.statistics import (
    CoOccurrencePair,
    CombinationRecord,
    FrequencyReport,
    GapRecord,
    HotColdRecord,
    PredictionScore,
    Scope,
    StatisticsResponse,
    StreakRecord,
    TrendRecord,
)

router = APIRouter()


def _validate_venue(ctx: IngestionContext, venue: str):
    if venue not in ctx.venues:
        raise HTTPException(status_code=404, detail=f"Unknown venue. Valid: {ctx.venues}")


@router.get("/{venue}/frequency", response_model=FrequencyReport)
async def frequency(
    venue: str,
    scope: Scope = Query("current"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Number frequency and hot numbers."""
    _validate_venue(ctx, venue)
    return stats.get_frequency(ctx, venue, scope, config)


@router.get("/{venue}/trends", response_model=list[TrendRecord])
async def trends(
    venue: str,
    scope: Scope = Query("current"),
    window: int | None = Query(None, ge=1, description="Most recent N draws"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Recent momentum."""
    _validate_venue(ctx, venue)
    return stats.get_trends(ctx, venue, scope, window, config)


@router.get("/{venue}/gaps", response_model=list[GapRecord])
async def gaps(
    venue: str,
    scope: Scope = Query("current"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Overdue numbers by gap ratio."""
    _validate_venue(ctx, venue)
    return stats.get_gaps(ctx, venue, scope, config)


@router.get("/{venue}/hot-cold", response_model=list[HotColdRecord])
async def hot_cold(
    venue: str,
    scope: Scope = Query("current"),
    window: int | None = Query(None, ge=1, description="Recent window size"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Recency-weighted hot/cold scores."""
    _validate_venue(ctx, venue)
    return stats.get_hot_cold(ctx, venue, scope, window, config)


@router.get("/{venue}/streaks", response_model=list[StreakRecord])
async def streaks(
    venue: str,
    scope: Scope = Query("current"),
    ctx: IngestionContext = Depends(get_context),
):
    _validate_venue(ctx, venue)
    return stats.get_streaks(ctx, venue, scope)


@router.get("/{venue}/pairs", response_model=list[CoOccurrencePair])
async def pairs(
    venue: str,
    scope: Scope = Query("current"),
    top_n: int = Query(10, ge=1, le=3160),
    ctx: IngestionContext = Depends(get_context),
):
    """Most common co-occurring pairs."""
    _validate_venue(ctx, venue)
    return stats.get_pairs(ctx, venue, scope, top_n=top_n)


@router.get("/{venue}/combinations", response_model=list[CombinationRecord])
async def combinations(
    venue: str,
    scope: Scope = Query("current"),
    size: int = Query(3, ge=2),
    top_k: int | None = Query(None, ge=1, le=100),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Most frequent multi-number combinations."""
    _validate_venue(ctx, venue)
    try:
        return stats.get_combinations(ctx, venue, scope, size, top_k, config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{venue}/predictions", response_model=list[PredictionScore])
async def predictions(
    venue: str,
    scope: Scope = Query("current"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Weighted trend/gap/hot-cold ranking."""
    _validate_venue(ctx, venue)
    return stats.get_predictions(ctx, venue, scope, config)


@router.get("/{venue}/report", response_model=StatisticsResponse)
async def report(
    venue: str,
    scope: Scope = Query("current"),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """All analyses in one response."""
    _validate_venue(ctx, venue)
    return stats.get_report(ctx, venue, scope, config)
