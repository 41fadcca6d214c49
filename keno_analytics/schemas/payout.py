"""Pydantic schemas for payout tables and payout calculations."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Denominations(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dollar: float = Field(gt=0)
    minimum_bet: float = Field(alias="minimumBet", ge=0)


class GamePayoutTable(BaseModel):
    """Payout schedule of one game type: spot count -> match count -> multiplier."""

    denominations: Denominations
    payouts: dict[int, dict[int, float]]

    @property
    def spot_counts(self) -> list[int]:
        return sorted(self.payouts)


class PayoutEntry(BaseModel):
    match_count: int
    payout_amount: float
    probability: float
    probability_display: str


class PayoutResult(BaseModel):
    valid: Literal[True] = True
    spot_count: int
    bet_amount: float
    num_games: int
    total_wager: float
    entries: list[PayoutEntry]


class BetValidationFailure(BaseModel):
    valid: Literal[False] = False
    minimum_bet: float
    message: str


class ExpectedValue(BaseModel):
    spot_count: int
    bet_amount: float
    expected_return: float
    house_edge: float  # 1 - expected_return / bet_amount


class QuickPick(BaseModel):
    spot_count: int
    numbers: list[int]
