"""Exact keno combinatorics: n-choose-k and hypergeometric hit probabilities."""

import random
from collections.abc import Mapping

POOL_SIZE = 80
DRAW_SIZE = 20


def n_choose_k(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items out of ``n``.

    Uses the running product ``result * (n - i + 1) / i`` instead of
    factorials. After step ``i`` the running value equals C(n, i), so the
    integer division is always exact.
    """
    if k > n or k < 0:
        return 0
    if k == 0 or k == n:
        return 1

    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def hypergeometric(
    matches: int,
    spot_count: int,
    pool_size: int = POOL_SIZE,
    draw_size: int = DRAW_SIZE,
) -> float:
    """Probability of hitting exactly ``matches`` of ``spot_count`` picks in one game.

    P = C(draw, m) * C(pool - draw, spots - m) / C(pool, spots)
    """
    if matches < 0 or matches > spot_count or matches > draw_size:
        return 0.0
    if spot_count > pool_size:
        return 0.0
    if spot_count - matches > pool_size - draw_size:
        return 0.0

    denominator = n_choose_k(pool_size, spot_count)
    if denominator == 0:
        return 0.0
    numerator = n_choose_k(draw_size, matches) * n_choose_k(pool_size - draw_size, spot_count - matches)
    return numerator / denominator


def probability_across_games(
    matches: int,
    spot_count: int,
    num_games: int,
    pool_size: int = POOL_SIZE,
    draw_size: int = DRAW_SIZE,
) -> float:
    """Probability of hitting exactly ``matches`` at least once over ``num_games`` games."""
    single = hypergeometric(matches, spot_count, pool_size, draw_size)
    return 1 - (1 - single) ** num_games


def expected_value(
    spot_count: int,
    payouts: Mapping[int, float],
    bet_amount: float = 1,
    pool_size: int = POOL_SIZE,
    draw_size: int = DRAW_SIZE,
) -> float:
    """Expected single-game return for a match-count -> payout schedule."""
    return sum(
        hypergeometric(int(matches), spot_count, pool_size, draw_size) * payout * bet_amount
        for matches, payout in payouts.items()
    )


def quick_pick(
    spot_count: int,
    pool_size: int = POOL_SIZE,
    rng: random.Random | None = None,
) -> list[int]:
    """Random distinct picks from the pool, sorted ascending."""
    if not 1 <= spot_count <= pool_size:
        raise ValueError(f"spot_count must be between 1 and {pool_size}, got {spot_count}")
    rng = rng or random.Random()
    return sorted(rng.sample(range(1, pool_size + 1), spot_count))
