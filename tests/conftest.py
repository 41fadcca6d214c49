import json
import random

import pytest

from keno_analytics.ingestion.context import IngestionContext
from keno_analytics.schemas.draws import DrawHistory

VENUES = ["omaha", "lincoln"]

PAYOUT_DATA = {
    "regularKeno": {
        "denominations": {"dollar": 1, "minimumBet": 1},
        "payouts": {
            "1": {"1": 2},
            "4": {"2": 1, "3": 5, "4": 60},
            "10": {"0": 3, "5": 2, "6": 20, "7": 100, "8": 1000, "9": 5000, "10": 100000},
        },
    },
    "pennyKeno": {
        "denominations": {"dollar": 0.25, "minimumBet": 2},
        "payouts": {"2": {"2": 3}},
    },
}


def random_draw(rng: random.Random) -> list[str]:
    return [f"{n:02d}" for n in rng.sample(range(1, 81), 20)]


def make_current_day(seed: int, games: int = 30, first_game: int = 100) -> dict:
    rng = random.Random(seed)
    return {str(first_game + i): random_draw(rng) for i in range(games)}


def make_all_data(seed: int, dates: list[str], games_per_day: int = 20) -> dict:
    rng = random.Random(seed)
    return {
        d: {str(g): random_draw(rng) for g in range(1, games_per_day + 1)}
        for d in dates
    }


@pytest.fixture
def abbreviated_history():
    """Short, hand-checkable draws (most recent first)."""
    return DrawHistory.from_number_lists([[1, 2, 3], [2, 3, 4]])


@pytest.fixture
def random_history():
    rng = random.Random(42)
    return DrawHistory.from_number_lists(
        [sorted(rng.sample(range(1, 81), 20)) for _ in range(60)]
    )


@pytest.fixture
def payout_data():
    return PAYOUT_DATA


@pytest.fixture
def data_dir(tmp_path):
    """A data directory with two venues and a payout file."""
    for i, venue in enumerate(VENUES):
        (tmp_path / f"{venue}.json").write_text(json.dumps(make_current_day(seed=i)))
        (tmp_path / f"{venue}allData.json").write_text(json.dumps(
            make_all_data(seed=100 + i, dates=["2024-03-01", "2024-03-02", "03/03/2024"])
        ))
    (tmp_path / "payoutData.json").write_text(json.dumps(PAYOUT_DATA))
    return tmp_path


@pytest.fixture
def loaded_context(data_dir):
    ctx = IngestionContext(data_dir=data_dir, venues=VENUES)
    for venue in VENUES:
        ctx.load_venue_sync(venue)
    ctx.load_payouts()
    return ctx
