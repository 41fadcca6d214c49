"""Gap analysis (overdue numbers)."""

from keno_analytics.engine.combinatorics import POOL_SIZE
from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import GapRecord


def analyze_gaps(history: DrawHistory, pool_size: int = POOL_SIZE) -> list[GapRecord]:
    """Current and average gap for every number in the pool.

    The counter of a number holds the draws missed since its previous hit.
    Draws are walked oldest to newest, so the final counter is the number of
    draws since the most recent appearance, and the first recorded gap is the
    leading run of misses before the oldest hit. A number never seen gets the
    total draw count as both its current and average gap.
    """
    total_draws = len(history)
    current_gaps = {num: 0 for num in range(1, pool_size + 1)}
    gap_lists: dict[int, list[int]] = {num: [] for num in current_gaps}

    for nums in reversed(history.number_lists):
        drawn = set(nums)
        for num in current_gaps:
            if num in drawn:
                gap_lists[num].append(current_gaps[num])
                current_gaps[num] = 0
            else:
                current_gaps[num] += 1

    result = []
    for num, current_gap in current_gaps.items():
        gaps = gap_lists[num]
        avg_gap = sum(gaps) / len(gaps) if gaps else float(total_draws)
        gap_ratio = current_gap / avg_gap if avg_gap > 0 else 0.0
        result.append(GapRecord(
            number=num,
            current_gap=current_gap,
            average_gap=avg_gap,
            gap_ratio=gap_ratio,
        ))

    return sorted(result, key=lambda x: (-x.gap_ratio, x.number))
