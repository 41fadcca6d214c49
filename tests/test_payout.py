"""Tests for payout table loading and payout calculation."""

import pytest

from keno_analytics.engine.combinatorics import hypergeometric, probability_across_games
from keno_analytics.engine.payout import (
    calculate_payouts,
    format_probability,
    load_payout_tables,
)
from keno_analytics.exceptions import PayoutTableError
from keno_analytics.schemas.payout import BetValidationFailure, PayoutResult


@pytest.fixture
def tables(payout_data):
    return load_payout_tables(payout_data)


class TestLoadPayoutTables:
    def test_parses_string_keys(self, tables):
        regular = tables["regularKeno"]
        assert regular.denominations.minimum_bet == 1
        assert regular.spot_counts == [1, 4, 10]
        assert regular.payouts[10][8] == 1000

    def test_missing_fields_fail_loudly(self):
        with pytest.raises(PayoutTableError):
            load_payout_tables({"broken": {"payouts": {"1": {"1": 2}}}})

    def test_non_numeric_payout_fails(self):
        with pytest.raises(PayoutTableError):
            load_payout_tables({
                "broken": {
                    "denominations": {"dollar": 1, "minimumBet": 1},
                    "payouts": {"1": {"1": "lots"}},
                }
            })


class TestCalculatePayouts:
    def test_single_game(self, tables):
        result = calculate_payouts(tables["regularKeno"], spot_count=4, bet_amount=2, num_games=1)
        assert isinstance(result, PayoutResult)
        assert [e.match_count for e in result.entries] == [4, 3, 2]
        assert result.entries[0].payout_amount == 120
        assert result.entries[0].probability == pytest.approx(hypergeometric(4, 4))

    def test_multiple_games_use_across_games_probability(self, tables):
        result = calculate_payouts(tables["regularKeno"], spot_count=4, bet_amount=1, num_games=5)
        assert result.total_wager == 5
        top = result.entries[0]
        assert top.probability == pytest.approx(probability_across_games(4, 4, 5))

    def test_denomination_scaling(self, tables):
        result = calculate_payouts(tables["pennyKeno"], spot_count=2, bet_amount=2)
        # 3 per 0.25 unit, 2.00 bet -> 8 units
        assert result.entries[0].payout_amount == 24

    def test_below_minimum_fails(self, tables):
        result = calculate_payouts(tables["pennyKeno"], spot_count=2, bet_amount=0.5, num_games=2)
        assert isinstance(result, BetValidationFailure)
        assert result.valid is False
        assert result.minimum_bet == 2

    def test_total_over_games_meets_minimum(self, tables):
        result = calculate_payouts(tables["pennyKeno"], spot_count=2, bet_amount=0.5, num_games=4)
        assert isinstance(result, PayoutResult)

    def test_zero_bet_fails(self, tables):
        result = calculate_payouts(tables["regularKeno"], spot_count=1, bet_amount=0, num_games=10)
        assert isinstance(result, BetValidationFailure)

    @pytest.mark.parametrize("bet", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_bet_fails(self, tables, bet):
        result = calculate_payouts(tables["regularKeno"], spot_count=4, bet_amount=bet, num_games=1)
        assert isinstance(result, BetValidationFailure)
        assert result.valid is False

    def test_entries_carry_display_probability(self, tables):
        result = calculate_payouts(tables["regularKeno"], spot_count=4, bet_amount=1)
        for entry in result.entries:
            assert entry.probability_display == format_probability(entry.probability)

    def test_unknown_spot_count(self, tables):
        with pytest.raises(PayoutTableError):
            calculate_payouts(tables["regularKeno"], spot_count=7, bet_amount=1)

    def test_invalid_game_count(self, tables):
        with pytest.raises(ValueError):
            calculate_payouts(tables["regularKeno"], spot_count=1, bet_amount=1, num_games=0)


class TestFormatProbability:
    def test_percentage(self):
        assert format_probability(0.25) == "25.00%"

    def test_scientific_for_small(self):
        assert format_probability(1e-7) == "1.00e-05%"
