"""Longest run of consecutive draws containing each number."""

from keno_analytics.schemas.draws import DrawHistory
from keno_analytics.schemas.statistics import StreakRecord


def analyze_streaks(history: DrawHistory) -> list[StreakRecord]:
    """Max streak per number, walking draws in the order given."""
    current: dict[int, int] = {}
    longest: dict[int, int] = {}

    for nums in history.number_lists:
        drawn = set(nums)
        for num in drawn:
            current[num] = current.get(num, 0) + 1
            longest[num] = max(longest.get(num, 0), current[num])
        # Reset streaks for missing numbers
        for num in current:
            if num not in drawn:
                current[num] = 0

    result = [StreakRecord(number=num, max_streak=m) for num, m in longest.items()]
    return sorted(result, key=lambda x: (-x.max_streak, x.number))
