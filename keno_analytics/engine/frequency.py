"""Raw occurrence counts per number."""

from collections import Counter

from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import NumberStat


def count_frequency(history: DrawHistory) -> list[NumberStat]:
    """Count every number seen at least once, most frequent first.

    Ties are broken by ascending number.
    """
    counter: Counter[int] = Counter()
    for nums in history.number_lists:
        counter.update(nums)

    return [
        NumberStat(number=num, count=count)
        for num, count in sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    ]


def frequency_lookup(stats: list[NumberStat]) -> dict[int, int]:
    """Index precomputed stats by number."""
    return {s.number: s.count for s in stats}


def hot_numbers(stats: list[NumberStat], count: int = 5) -> list[NumberStat]:
    """The ``count`` most frequent numbers of an already-sorted frequency list."""
    return stats[:count]
