"""Statistics service — frequency, trends, gaps, streaks, pairs, combinations, predictions."""

from keno_analytics.config import AnalysisConfig
from keno_analytics.engine.co_occurrence import co_occurrence, top_combinations
from keno_analytics.engine.frequency import count_frequency, hot_numbers
from keno_analytics.engine.gaps import analyze_gaps
from keno_analytics.engine.predictor import predict
from keno_analytics.engine.streaks import analyze_streaks
from keno_analytics.engine.trends import hot_cold, recent_trend
from keno_analytics.ingestion.context import IngestionContext
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


def get_frequency(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    config: AnalysisConfig | None = None,
) -> FrequencyReport:
    """Number frequency plus the hot-number shortlist."""
    config = config or AnalysisConfig()
    history = ctx.history(venue, scope)
    freq = count_frequency(history)
    return FrequencyReport(
        venue=venue,
        scope=scope,
        total_draws=len(history),
        skipped_draws=history.skipped,
        frequency=freq,
        hot_numbers=hot_numbers(freq, config.hot_count),
    )


def get_trends(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    window: int | None = None,
    config: AnalysisConfig | None = None,
) -> list[TrendRecord]:
    config = config or AnalysisConfig()
    return recent_trend(ctx.history(venue, scope), window_size=window or config.trend_window)


def get_gaps(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    config: AnalysisConfig | None = None,
) -> list[GapRecord]:
    config = config or AnalysisConfig()
    return analyze_gaps(ctx.history(venue, scope), pool_size=config.pool_size)


def get_hot_cold(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    window: int | None = None,
    config: AnalysisConfig | None = None,
) -> list[HotColdRecord]:
    config = config or AnalysisConfig()
    return hot_cold(
        ctx.history(venue, scope),
        recent_window=window or config.hot_cold_window,
        recent_weight=config.recent_weight,
    )


def get_streaks(ctx: IngestionContext, venue: str, scope: Scope = "current") -> list[StreakRecord]:
    return analyze_streaks(ctx.history(venue, scope))


def get_pairs(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    top_n: int | None = None,
) -> list[CoOccurrencePair]:
    """Most common pairs; every pair when ``top_n`` is None."""
    pairs = co_occurrence(ctx.history(venue, scope))
    return pairs[:top_n] if top_n else pairs


def get_combinations(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    size: int = 3,
    top_k: int | None = None,
    config: AnalysisConfig | None = None,
) -> list[CombinationRecord]:
    """Top combinations over the most recent ``combination_history_limit`` draws."""
    config = config or AnalysisConfig()
    if not config.combo_min_size <= size <= config.combo_max_size:
        raise ValueError(
            f"Combination size must be between {config.combo_min_size} "
            f"and {config.combo_max_size}, got {size}"
        )
    history = ctx.history(venue, scope).head(config.combination_history_limit)
    return top_combinations(
        history,
        size=size,
        frequency=count_frequency(history),
        top_k=top_k or config.top_k,
    )


def get_predictions(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    config: AnalysisConfig | None = None,
) -> list[PredictionScore]:
    return predict(ctx.history(venue, scope), config)


def get_report(
    ctx: IngestionContext,
    venue: str,
    scope: Scope = "current",
    config: AnalysisConfig | None = None,
) -> StatisticsResponse:
    """Every analysis for one venue and scope in a single response."""
    config = config or AnalysisConfig()
    history = ctx.history(venue, scope)
    combo_history = history.head(config.combination_history_limit)
    freq = count_frequency(history)

    return StatisticsResponse(
        venue=venue,
        scope=scope,
        total_draws=len(history),
        skipped_draws=history.skipped,
        frequency=freq,
        trends=recent_trend(history, window_size=config.trend_window),
        gaps=analyze_gaps(history, pool_size=config.pool_size),
        hot_cold=hot_cold(history, config.hot_cold_window, config.recent_weight),
        streaks=analyze_streaks(history),
        pairs=co_occurrence(history)[:config.top_k],
        combinations=top_combinations(
            combo_history,
            size=config.combo_min_size,
            frequency=freq if len(combo_history) == len(history) else None,
            top_k=config.top_k,
        ),
        predictions=predict(history, config),
    )
