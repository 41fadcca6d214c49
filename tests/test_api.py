"""Integration tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from keno_analytics.config import settings
from keno_analytics.main import app


@pytest.fixture
def client(data_dir, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", data_dir)
    monkeypatch.setattr(settings, "LOCATIONS", ["omaha", "lincoln"])
    with TestClient(app) as c:
        yield c


class TestStatisticsEndpoints:
    def test_frequency(self, client):
        response = client.get("/api/v1/stats/omaha/frequency")
        assert response.status_code == 200
        data = response.json()
        assert data["venue"] == "omaha"
        assert data["total_draws"] == 30
        assert len(data["hot_numbers"]) == 5
        counts = [f["count"] for f in data["frequency"]]
        assert counts == sorted(counts, reverse=True)

    def test_all_scope(self, client):
        response = client.get("/api/v1/stats/lincoln/frequency", params={"scope": "all"})
        assert response.json()["total_draws"] == 60

    def test_invalid_scope(self, client):
        response = client.get("/api/v1/stats/omaha/frequency", params={"scope": "week"})
        assert response.status_code == 422

    def test_unknown_venue(self, client):
        response = client.get("/api/v1/stats/springfield/gaps")
        assert response.status_code == 404

    def test_gaps_cover_pool(self, client):
        data = client.get("/api/v1/stats/omaha/gaps").json()
        assert len(data) == 80
        assert {"number", "current_gap", "average_gap", "gap_ratio"} <= set(data[0])

    def test_pairs_and_streaks(self, client):
        pairs = client.get("/api/v1/stats/omaha/pairs", params={"top_n": 5}).json()
        assert len(pairs) == 5
        assert pairs[0]["number_a"] < pairs[0]["number_b"]
        streaks = client.get("/api/v1/stats/omaha/streaks").json()
        assert streaks[0]["max_streak"] >= streaks[-1]["max_streak"]

    def test_combinations(self, client):
        data = client.get("/api/v1/stats/omaha/combinations", params={"top_k": 3}).json()
        assert len(data) == 3
        assert all(len(c["numbers"]) == 3 for c in data)

    def test_combination_size_out_of_range(self, client):
        response = client.get("/api/v1/stats/omaha/combinations", params={"size": 9})
        assert response.status_code == 400

    def test_predictions(self, client):
        data = client.get("/api/v1/stats/omaha/predictions").json()
        assert len(data) == 10
        assert data[0]["confidence"].endswith("%")

    def test_trends_and_hot_cold(self, client):
        trends = client.get("/api/v1/stats/omaha/trends", params={"window": 5}).json()
        assert all(t["recent_frequency"] <= 5 for t in trends)
        hot = client.get("/api/v1/stats/omaha/hot-cold").json()
        assert hot[0]["weighted_score"] >= hot[-1]["weighted_score"]

    def test_report(self, client):
        data = client.get("/api/v1/stats/omaha/report").json()
        assert data["total_draws"] == 30
        assert len(data["pairs"]) == 10
        assert len(data["predictions"]) == 10


class TestPayoutEndpoints:
    def test_games(self, client):
        data = client.get("/api/v1/payouts/games").json()
        assert data["regularKeno"] == [1, 4, 10]

    def test_calculate(self, client):
        response = client.get(
            "/api/v1/payouts/regularKeno/calculate",
            params={"spot_count": 10, "bet_amount": 1, "num_games": 1},
        )
        data = response.json()
        assert data["valid"] is True
        assert data["entries"][0]["match_count"] == 10

    def test_calculate_below_minimum(self, client):
        response = client.get(
            "/api/v1/payouts/pennyKeno/calculate",
            params={"spot_count": 2, "bet_amount": 0.5, "num_games": 1},
        )
        assert response.status_code == 200
        assert response.json()["valid"] is False

    @pytest.mark.parametrize("bet", ["nan", "inf"])
    def test_calculate_rejects_non_finite_bet(self, client, bet):
        response = client.get(
            "/api/v1/payouts/regularKeno/calculate",
            params={"spot_count": 4, "bet_amount": bet},
        )
        assert response.status_code == 422

    def test_unknown_game_or_spot(self, client):
        assert client.get(
            "/api/v1/payouts/nope/calculate", params={"spot_count": 1, "bet_amount": 1},
        ).status_code == 400
        assert client.get(
            "/api/v1/payouts/regularKeno/calculate", params={"spot_count": 3, "bet_amount": 1},
        ).status_code == 400

    def test_expected_value(self, client):
        data = client.get(
            "/api/v1/payouts/regularKeno/expected-value", params={"spot_count": 1},
        ).json()
        assert data["expected_return"] == pytest.approx(0.5)
        assert data["house_edge"] == pytest.approx(0.5)

    def test_quick_pick(self, client):
        data = client.get("/api/v1/payouts/quick-pick", params={"spot_count": 6}).json()
        assert len(data["numbers"]) == 6


class TestDataEndpoints:
    def test_status_and_reload(self, client):
        status = client.get("/api/v1/data/status").json()
        assert status["venues_loaded"] == ["lincoln", "omaha"]
        assert status["errors"] == 0

        reloaded = client.post("/api/v1/data/reload").json()
        assert reloaded["payout_games"] == ["pennyKeno", "regularKeno"]
