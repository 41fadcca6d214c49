"""Pair co-occurrence and multi-number combination analysis."""

import heapq
from collections import Counter
from itertools import combinations

from loguru import logger

from keno_analytics.engine.frequency import count_frequency, frequency_lookup
from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import CoOccurrencePair, CombinationRecord, NumberStat


def co_occurrence(history: DrawHistory) -> list[CoOccurrencePair]:
    """How often each pair of numbers was drawn together, most frequent first."""
    pair_counter: Counter[tuple[int, ...]] = Counter()
    for nums in history.number_lists:
        # Draw numbers are stored sorted, so every pair is already canonical
        pair_counter.update(combinations(nums, 2))

    ranked = sorted(pair_counter.items(), key=lambda item: (-item[1], item[0]))
    return [
        CoOccurrencePair(number_a=a, number_b=b, frequency=count)
        for (a, b), count in ranked
    ]


def top_combinations(
    history: DrawHistory,
    size: int = 3,
    frequency: list[NumberStat] | None = None,
    top_k: int = 10,
) -> list[CombinationRecord]:
    """Most frequent ``size``-number combinations across the history.

    Ranking: occurrences, then the summed individual frequency of the
    members, then the combination itself. ``frequency`` should be
    FrequencyCounter output over the same history; it is computed once here
    when omitted.
    """
    if size < 2:
        raise ValueError(f"combination size must be at least 2, got {size}")
    total_draws = len(history)
    if total_draws == 0:
        return []

    if frequency is None:
        frequency = count_frequency(history)
    lookup = frequency_lookup(frequency)

    combo_counter: Counter[tuple[int, ...]] = Counter()
    for nums in history.number_lists:
        combo_counter.update(combinations(nums, size))
    logger.debug("{} distinct {}-combinations over {} draws", len(combo_counter), size, total_draws)

    def _rank(item: tuple[tuple[int, ...], int]) -> tuple[int, int, tuple[int, ...]]:
        combo, count = item
        return -count, -sum(lookup.get(n, 0) for n in combo), combo

    top = heapq.nsmallest(top_k, combo_counter.items(), key=_rank)
    return [
        CombinationRecord(
            numbers=combo,
            occurrences=count,
            confidence=round(count / total_draws * 100, 2),
            avg_individual_frequency=round(sum(lookup.get(n, 0) for n in combo) / size, 2),
        )
        for combo, count in top
    ]


def combinations3(
    history: DrawHistory,
    frequency: list[NumberStat] | None = None,
    top_k: int = 10,
) -> list[CombinationRecord]:
    """Top triples, the default combination analysis."""
    return top_combinations(history, size=3, frequency=frequency, top_k=top_k)
