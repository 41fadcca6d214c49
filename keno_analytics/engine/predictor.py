"""Weighted prediction: recent trend + gap ratio + hot/cold score."""

import numpy as np
from loguru import logger

from keno_analytics.config import AnalysisConfig
from keno_analytics.engine.gaps import analyze_gaps
from keno_analytics.engine.trends import hot_cold, recent_trend
from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import PredictionScore


def _score_vector(scores: dict[int, float], pool_size: int) -> np.ndarray:
    vec = np.zeros(pool_size, dtype=np.float64)
    for num, score in scores.items():
        vec[num - 1] = score
    return vec


def predict(history: DrawHistory, config: AnalysisConfig | None = None) -> list[PredictionScore]:
    """Rank numbers by the weighted sum of their max-normalized metric scores.

    Returns an empty list when any metric has nothing to normalize against
    (no records, or a maximum of zero). Only numbers in
    ``1..config.pool_size`` are scored.
    """
    config = config or AnalysisConfig()

    trends = recent_trend(history, window_size=config.trend_window)
    gaps = analyze_gaps(history, pool_size=config.pool_size)
    hot = hot_cold(
        history,
        recent_window=config.hot_cold_window,
        recent_weight=config.recent_weight,
    )

    # Numbers outside the configured pool are ignored, as in analyze_gaps
    in_pool = range(1, config.pool_size + 1)
    trend_raw = {t.number: t.momentum for t in trends if t.number in in_pool}
    gap_raw = {g.number: g.gap_ratio for g in gaps}
    hot_raw = {h.number: h.weighted_score for h in hot if h.number in in_pool}

    components = [
        (_score_vector(trend_raw, config.pool_size), config.trend_weight),
        (_score_vector(gap_raw, config.pool_size), config.gap_weight),
        (_score_vector(hot_raw, config.pool_size), config.hot_cold_weight),
    ]

    combined = np.zeros(config.pool_size, dtype=np.float64)
    for vec, weight in components:
        peak = vec.max()
        if peak <= 0:
            logger.debug("Prediction skipped: a metric set is empty ({} draws)", len(history))
            return []
        combined += weight * (vec / peak)

    candidates = trend_raw.keys() | gap_raw.keys() | hot_raw.keys()
    ranked = sorted(candidates, key=lambda n: (-combined[n - 1], n))[:config.top_k]

    return [
        PredictionScore(
            number=num,
            score=round(float(combined[num - 1]), 3),
            confidence=f"{combined[num - 1] * 100:.1f}%",
            recent_trend=trend_raw.get(num, 0.0),
            gap_analysis=gap_raw.get(num, 0.0),
            hot_cold_score=hot_raw.get(num, 0.0),
        )
        for num in ranked
    ]
