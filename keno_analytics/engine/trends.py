"""Recency-based analyzers: recent-window momentum and weighted hot/cold scores."""

from collections import Counter

from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import HotColdRecord, TrendRecord


def recent_trend(history: DrawHistory, window_size: int = 10) -> list[TrendRecord]:
    """Frequency of each number within the ``window_size`` most recent draws.

    Only numbers observed in the window are returned.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be positive, got {window_size}")

    counter: Counter[int] = Counter()
    for nums in history.head(window_size).number_lists:
        counter.update(nums)

    result = [
        TrendRecord(number=num, recent_frequency=count, momentum=count / window_size)
        for num, count in counter.items()
    ]
    return sorted(result, key=lambda x: (-x.momentum, x.number))


def hot_cold(
    history: DrawHistory,
    recent_window: int = 20,
    recent_weight: float = 2,
) -> list[HotColdRecord]:
    """Occurrence score where recent draws count ``recent_weight`` times.

    ``recent_performance`` is the share of the recent window containing the
    number, always measured against the full window size.
    """
    if recent_window < 1:
        raise ValueError(f"recent_window must be positive, got {recent_window}")

    recent_counts: Counter[int] = Counter()
    for nums in history.head(recent_window).number_lists:
        recent_counts.update(nums)

    older_counts: Counter[int] = Counter()
    for nums in history.tail(recent_window).number_lists:
        older_counts.update(nums)

    result = [
        HotColdRecord(
            number=num,
            weighted_score=recent_counts[num] * recent_weight + older_counts[num],
            recent_performance=recent_counts[num] / recent_window,
        )
        for num in recent_counts.keys() | older_counts.keys()
    ]
    return sorted(result, key=lambda x: (-x.weighted_score, x.number))
