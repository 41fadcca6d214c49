"""Payout calculator API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from keno_analytics.api.deps import get_analysis_config, get_context
from keno_analytics.config import AnalysisConfig
from keno_analytics.exceptions import PayoutTableError
from keno_analytics.ingestion.context import IngestionContext
from keno_analytics.services import payout_service
from keno_analytics.schemas.payout import (
    BetValidationFailure,
    ExpectedValue,
    PayoutResult,
    QuickPick,
)

router = APIRouter()


@router.get("/games")
async def games(ctx: IngestionContext = Depends(get_context)) -> dict[str, list[int]]:
    """Game types and their spot counts."""
    return payout_service.list_games(ctx)


@router.get("/quick-pick", response_model=QuickPick)
async def quick_pick(
    spot_count: int = Query(10, ge=1, le=20),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Random ticket numbers."""
    return payout_service.generate_pick(spot_count, config)


@router.get("/{game_type}/calculate", response_model=PayoutResult | BetValidationFailure)
async def calculate(
    game_type: str,
    spot_count: int = Query(..., ge=1),
    bet_amount: float = Query(..., allow_inf_nan=False),
    num_games: int = Query(1, ge=1),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Potential payouts and hit probabilities for a bet."""
    try:
        return payout_service.calculate(ctx, game_type, spot_count, bet_amount, num_games, config)
    except PayoutTableError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{game_type}/expected-value", response_model=ExpectedValue)
async def expected_value(
    game_type: str,
    spot_count: int = Query(..., ge=1),
    bet_amount: float = Query(1, gt=0, allow_inf_nan=False),
    ctx: IngestionContext = Depends(get_context),
    config: AnalysisConfig = Depends(get_analysis_config),
):
    """Expected return of a single game."""
    try:
        return payout_service.get_expected_value(ctx, game_type, spot_count, bet_amount, config)
    except PayoutTableError as e:
        raise HTTPException(status_code=400, detail=str(e))
