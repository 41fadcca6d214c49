"""Pydantic schemas for statistics."""

from typing import Literal

from pydantic import BaseModel, model_validator

Scope = Literal["current", "all"]


class NumberStat(BaseModel):
    number: int
    count: int


class TrendRecord(BaseModel):
    number: int
    recent_frequency: int
    momentum: float  # recent_frequency / window_size


class GapRecord(BaseModel):
    number: int
    current_gap: int
    average_gap: float
    gap_ratio: float  # current_gap / average_gap


class HotColdRecord(BaseModel):
    number: int
    weighted_score: float
    recent_performance: float


class StreakRecord(BaseModel):
    number: int
    max_streak: int


class CoOccurrencePair(BaseModel):
    number_a: int
    number_b: int
    frequency: int

    @model_validator(mode="after")
    def _ordered(self) -> "CoOccurrencePair":
        if self.number_a >= self.number_b:
            raise ValueError("number_a must be smaller than number_b")
        return self

    @property
    def pair(self) -> tuple[int, int]:
        return self.number_a, self.number_b


class CombinationRecord(BaseModel):
    numbers: tuple[int, ...]
    occurrences: int
    confidence: float  # percent of draws containing the combination
    avg_individual_frequency: float


class PredictionScore(BaseModel):
    number: int
    score: float
    confidence: str
    recent_trend: float
    gap_analysis: float
    hot_cold_score: float


class FrequencyReport(BaseModel):
    venue: str
    scope: Scope
    total_draws: int
    skipped_draws: int
    frequency: list[NumberStat]
    hot_numbers: list[NumberStat]


class StatisticsResponse(BaseModel):
    venue: str
    scope: Scope
    total_draws: int
    skipped_draws: int = 0
    frequency: list[NumberStat] | None = None
    trends: list[TrendRecord] | None = None
    gaps: list[GapRecord] | None = None
    hot_cold: list[HotColdRecord] | None = None
    streaks: list[StreakRecord] | None = None
    pairs: list[CoOccurrencePair] | None = None
    combinations: list[CombinationRecord] | None = None
    predictions: list[PredictionScore] | None = None
