"""Payout service — bet calculations against the loaded payout tables."""

import random

from keno_analytics.config import AnalysisConfig
from keno_analytics.engine.combinatorics import expected_value, quick_pick
from keno_analytics.engine.payout import calculate_payouts, spot_payouts
from keno_analytics.exceptions import PayoutTableError
from keno_analytics.ingestion.context import IngestionContext
from keno_analytics.schemas.payout import (
    BetValidationFailure,
    ExpectedValue,
    GamePayoutTable,
    PayoutResult,
    QuickPick,
)


def get_table(ctx: IngestionContext, game_type: str) -> GamePayoutTable:
    table = ctx.payout_tables.get(game_type)
    if table is None:
        raise PayoutTableError(
            f"Unknown game type: {game_type}. Valid: {sorted(ctx.payout_tables)}"
        )
    return table


def list_games(ctx: IngestionContext) -> dict[str, list[int]]:
    """Game types with their available spot counts."""
    return {game: table.spot_counts for game, table in ctx.payout_tables.items()}


def calculate(
    ctx: IngestionContext,
    game_type: str,
    spot_count: int,
    bet_amount: float,
    num_games: int = 1,
    config: AnalysisConfig | None = None,
) -> PayoutResult | BetValidationFailure:
    config = config or AnalysisConfig()
    return calculate_payouts(
        get_table(ctx, game_type),
        spot_count,
        bet_amount,
        num_games,
        pool_size=config.pool_size,
        draw_size=config.draw_size,
    )


def get_expected_value(
    ctx: IngestionContext,
    game_type: str,
    spot_count: int,
    bet_amount: float = 1,
    config: AnalysisConfig | None = None,
) -> ExpectedValue:
    """Expected return of one game; payouts are scaled per denomination unit."""
    config = config or AnalysisConfig()
    table = get_table(ctx, game_type)
    scaled = bet_amount / table.denominations.dollar
    ev = expected_value(
        spot_count,
        spot_payouts(table, spot_count),
        scaled,
        pool_size=config.pool_size,
        draw_size=config.draw_size,
    )
    return ExpectedValue(
        spot_count=spot_count,
        bet_amount=bet_amount,
        expected_return=ev,
        house_edge=1 - ev / bet_amount if bet_amount > 0 else 0.0,
    )


def generate_pick(
    spot_count: int,
    config: AnalysisConfig | None = None,
    rng: random.Random | None = None,
) -> QuickPick:
    config = config or AnalysisConfig()
    return QuickPick(spot_count=spot_count, numbers=quick_pick(spot_count, config.pool_size, rng))
