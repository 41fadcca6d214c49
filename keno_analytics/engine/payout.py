"""Payout calculation for a bet against a game type's payout table."""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from keno_analytics.engine.combinatorics import (
    DRAW_SIZE,
    POOL_SIZE,
    hypergeometric,
    probability_across_games,
)
from keno_analytics.exceptions import PayoutTableError
from keno_analytics.schemas.payout import (
    BetValidationFailure,
    GamePayoutTable,
    PayoutEntry,
    PayoutResult,
)

_TABLES = TypeAdapter(dict[str, GamePayoutTable])


def load_payout_tables(raw: Mapping[str, Any]) -> dict[str, GamePayoutTable]:
    """Validate a ``{"<gameType>": {"denominations": ..., "payouts": ...}}`` document."""
    try:
        return _TABLES.validate_python(raw)
    except ValidationError as e:
        raise PayoutTableError(f"Invalid payout table: {e}") from e


def spot_payouts(table: GamePayoutTable, spot_count: int) -> dict[int, float]:
    if spot_count not in table.payouts:
        raise PayoutTableError(
            f"No payouts for {spot_count} spots. Valid: {table.spot_counts}"
        )
    return table.payouts[spot_count]


def calculate_payouts(
    table: GamePayoutTable,
    spot_count: int,
    bet_amount: float,
    num_games: int = 1,
    pool_size: int = POOL_SIZE,
    draw_size: int = DRAW_SIZE,
) -> PayoutResult | BetValidationFailure:
    """Scaled payout and hit probability for every match tier, highest first.

    A non-finite or non-positive bet is rejected. Otherwise the bet is
    rejected only when both the per-game bet and the total over all games
    are below the table's minimum.
    """
    if num_games < 1:
        raise ValueError(f"num_games must be at least 1, got {num_games}")
    payouts = spot_payouts(table, spot_count)

    minimum = table.denominations.minimum_bet
    if not math.isfinite(bet_amount) or bet_amount <= 0:
        return BetValidationFailure(
            minimum_bet=minimum,
            message=f"Bet amount must be a positive number; minimum is ${minimum}",
        )
    if bet_amount < minimum and bet_amount * num_games < minimum:
        return BetValidationFailure(
            minimum_bet=minimum,
            message=f"Minimum bet amount is ${minimum}",
        )

    scale = bet_amount / table.denominations.dollar
    entries = []
    for matches in sorted(payouts, reverse=True):
        if num_games == 1:
            probability = hypergeometric(matches, spot_count, pool_size, draw_size)
        else:
            probability = probability_across_games(matches, spot_count, num_games, pool_size, draw_size)
        entries.append(PayoutEntry(
            match_count=matches,
            payout_amount=round(payouts[matches] * scale, 2),
            probability=probability,
            probability_display=format_probability(probability),
        ))

    return PayoutResult(
        spot_count=spot_count,
        bet_amount=bet_amount,
        num_games=num_games,
        total_wager=round(bet_amount * num_games, 2),
        entries=entries,
    )


def format_probability(probability: float) -> str:
    """Percentage string, in scientific notation when the probability is below 1e-3."""
    if probability < 1e-3:
        return f"{probability * 100:.2e}%"
    return f"{probability * 100:.2f}%"
